"""NormalizeUploadUseCase — validate and normalize already-parsed plan rows."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from assigner.domain.value_objects.cells import (
    format_timestamp,
    parse_datetime,
    parse_float_prefix,
)

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "plannedAbapDevStart",
    "plannedAbapDevEnd",
    "abapAssigned",
    "abapDevelopmentTime",
)
DATE_COLUMNS = ("plannedAbapDevStart", "plannedAbapDevEnd")
NUMERIC_COLUMNS = ("abapDevelopmentTime",)


class UploadValidationError(ValueError):
    """The upload payload is malformed; reported to the caller as a 400."""


class NormalizeUploadUseCase:
    """Validates the row batch shape and normalizes dates and numbers."""

    def _validate(self, data: object) -> list:
        if not isinstance(data, list):
            raise UploadValidationError("Invalid data format. Expected array of objects.")
        if not data:
            raise UploadValidationError("No data provided.")

        first_row = data[0]
        if not isinstance(first_row, Mapping):
            raise UploadValidationError(
                "Invalid data structure. Expected object with project data."
            )
        missing = [col for col in REQUIRED_COLUMNS if col not in first_row]
        if missing:
            raise UploadValidationError(f"Missing required columns: {', '.join(missing)}")
        return data

    @staticmethod
    def _normalize_row(row: Mapping) -> dict:
        processed = dict(row)
        # Unparseable values are kept as they came in
        for col in DATE_COLUMNS:
            if row.get(col):
                parsed = parse_datetime(row[col])
                if parsed is not None:
                    processed[col] = format_timestamp(parsed)
        for col in NUMERIC_COLUMNS:
            if row.get(col):
                number = parse_float_prefix(row[col])
                if number is not None:
                    processed[col] = number
        return processed

    def execute(self, data: object) -> list[dict]:
        """Validate the payload and return normalized copies of its rows.

        Only the first row is checked for required columns; later rows that
        are not objects pass through unchanged.

        Raises:
            UploadValidationError: on a non-list, empty or incomplete payload.
        """
        rows = self._validate(data)
        processed = [
            self._normalize_row(row) if isinstance(row, Mapping) else row
            for row in rows
        ]
        logger.info("Normalized %d SAP project records", len(processed))
        return processed
