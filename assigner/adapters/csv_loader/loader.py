"""CSV loader — reads plan exports into rows and writes them back."""

from __future__ import annotations

import csv
import logging
import re
import unicodedata
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

# Candidate delimiters, in tie-break order; Spanish Excel exports use ';'
PLAN_DELIMITERS = (";", ",", "\t")


def plan_header_key(header: str) -> str:
    """Map a spreadsheet header onto the snake_case binding names of the plans.

    Accents are folded and every run of separators or punctuation becomes one
    underscore, so "Plan ABAP Dev Ini", "Módulo" and "Esfu. Disponible (h)"
    read as ``plan_abap_dev_ini``, ``modulo`` and ``esfu_disponible_h``.
    BOM and non-breaking spaces from Excel exports are dropped on the way.
    """
    folded = unicodedata.normalize("NFKD", header).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^0-9a-z]+", "_", folded.lower()).strip("_")


def _detect_delimiter(header_line: str) -> str:
    counts = {d: header_line.count(d) for d in PLAN_DELIMITERS}
    best = max(PLAN_DELIMITERS, key=lambda d: counts[d])
    return best if counts[best] else ","


def _cell(value: str | None) -> str | None:
    # Blank cells read as missing
    if value is None or not value.strip():
        return None
    return value.strip()


def read_plan_rows(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a plan CSV with BOM handling and header normalization.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of dicts keyed by binding name; blank cells are None.

    Raises:
        ValueError: if the file has no header row.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        header_line = f.readline()
        f.seek(0)
        reader = csv.DictReader(f, delimiter=_detect_delimiter(header_line))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        keys = {col: plan_header_key(col) for col in reader.fieldnames}
        rows = [
            {keys[col]: _cell(value) for col, value in raw.items() if col is not None}
            for raw in reader
        ]

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(keys.values()))
    return rows


def write_plan_rows(rows: Sequence[Mapping[str, object]], stream: TextIO) -> None:
    """Write rows as CSV, columns in first-seen order across all rows."""
    fieldnames: list[str] = []
    for row in rows:
        for key in row:
            if key not in fieldnames:
                fieldnames.append(key)

    writer = csv.DictWriter(stream, fieldnames=fieldnames)
    writer.writeheader()
    for row in rows:
        writer.writerow({k: "" if v is None else v for k, v in row.items()})
