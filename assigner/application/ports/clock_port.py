"""Port interface for the current instant."""

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime.

        Priority scores are relative to this value, so a fixed clock makes a
        run reproducible.
        """
        ...
