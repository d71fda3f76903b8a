"""Run the assignment engine over a plan CSV export.

Usage:
    python -m assigner.tools.assign_csv plan.csv --plan-type "Plan de PU" -o assigned.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from assigner.adapters.clock.system_clock import SystemClock
from assigner.adapters.csv_loader.loader import read_plan_rows, write_plan_rows
from assigner.application.use_cases.calculate_assignments import CalculateAssignmentsUseCase
from assigner.config import settings
from assigner.domain.value_objects.enums import PlanType
from assigner.domain.value_objects.plan_config import UnknownPlanTypeError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Assign resources to the tasks of a plan CSV")
    parser.add_argument("input", type=str, help="Plan CSV exported from the planning sheet")
    parser.add_argument(
        "--plan-type", type=str, default=settings.default_plan_type,
        help=f"One of: {', '.join(p.value for p in PlanType.known())} "
             f"(default: {settings.default_plan_type})",
    )
    parser.add_argument(
        "-o", "--output", type=str, default=None,
        help="Where to write the assigned CSV (default: stdout)",
    )
    parser.add_argument(
        "--strict", action="store_true", default=settings.strict_plan_types,
        help="Fail on an unknown plan type instead of using the default plan",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every assignment")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
        stream=sys.stderr,
    )

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error("Input file not found: %s", input_path)
        return 1

    rows = read_plan_rows(input_path)
    uc = CalculateAssignmentsUseCase(clock=SystemClock(), strict_plan_types=args.strict)
    try:
        report = uc.execute(rows, args.plan_type)
    except UnknownPlanTypeError as e:
        logger.error("%s", e)
        return 2

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            write_plan_rows(report.rows, f)
        logger.info("Wrote %d rows to %s", len(report.rows), args.output)
    else:
        write_plan_rows(report.rows, sys.stdout)

    if report.unassigned_task_ids:
        logger.warning("Unassigned tasks: %s", ", ".join(report.unassigned_task_ids))
    return 0


if __name__ == "__main__":
    sys.exit(main())
