"""System clock adapter."""

from datetime import datetime, timezone

from assigner.application.ports.clock_port import ClockPort


class SystemClock(ClockPort):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
