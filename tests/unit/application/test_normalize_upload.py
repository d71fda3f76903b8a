"""Tests for NormalizeUploadUseCase."""

import pytest

from assigner.application.use_cases.normalize_upload import (
    NormalizeUploadUseCase,
    UploadValidationError,
)


def _row(**overrides) -> dict:
    row = {
        "plannedAbapDevStart": "2025-03-04",
        "plannedAbapDevEnd": "04/04/2025",
        "abapAssigned": "Ana",
        "abapDevelopmentTime": "12.5",
    }
    row.update(overrides)
    return row


# ─── Validation ──────────────────────────────────────────────────────


def test_rejects_non_list():
    with pytest.raises(UploadValidationError, match="Expected array of objects"):
        NormalizeUploadUseCase().execute({"plannedAbapDevStart": "2025-03-04"})


def test_rejects_missing_data():
    with pytest.raises(UploadValidationError, match="Expected array of objects"):
        NormalizeUploadUseCase().execute(None)


def test_rejects_empty_list():
    with pytest.raises(UploadValidationError, match="No data provided"):
        NormalizeUploadUseCase().execute([])


def test_rejects_non_object_first_row():
    with pytest.raises(UploadValidationError, match="Invalid data structure"):
        NormalizeUploadUseCase().execute(["not a row"])


def test_lists_all_missing_columns():
    row = _row()
    del row["abapAssigned"]
    del row["abapDevelopmentTime"]
    with pytest.raises(UploadValidationError) as exc:
        NormalizeUploadUseCase().execute([row])
    assert str(exc.value) == "Missing required columns: abapAssigned, abapDevelopmentTime"


def test_validation_error_is_value_error():
    assert issubclass(UploadValidationError, ValueError)


# ─── Normalization ───────────────────────────────────────────────────


def test_dates_become_utc_timestamps():
    out = NormalizeUploadUseCase().execute([_row()])
    assert out[0]["plannedAbapDevStart"] == "2025-03-04T00:00:00.000Z"
    assert out[0]["plannedAbapDevEnd"] == "2025-04-04T00:00:00.000Z"


def test_ambiguous_slash_date_is_month_first():
    out = NormalizeUploadUseCase().execute([_row(plannedAbapDevEnd="04/03/2025")])
    assert out[0]["plannedAbapDevEnd"] == "2025-04-03T00:00:00.000Z"


def test_hours_become_float():
    out = NormalizeUploadUseCase().execute([_row(abapDevelopmentTime="8h")])
    assert out[0]["abapDevelopmentTime"] == 8.0


def test_unparseable_values_kept():
    out = NormalizeUploadUseCase().execute(
        [_row(plannedAbapDevStart="soon", abapDevelopmentTime="n/a")]
    )
    assert out[0]["plannedAbapDevStart"] == "soon"
    assert out[0]["abapDevelopmentTime"] == "n/a"


def test_empty_values_untouched():
    out = NormalizeUploadUseCase().execute([_row(plannedAbapDevEnd="", abapDevelopmentTime=0)])
    assert out[0]["plannedAbapDevEnd"] == ""
    assert out[0]["abapDevelopmentTime"] == 0


def test_other_columns_and_input_preserved():
    rows = [_row(modulo="FI")]
    out = NormalizeUploadUseCase().execute(rows)
    assert out[0]["modulo"] == "FI"
    assert out[0]["abapAssigned"] == "Ana"
    assert rows[0]["plannedAbapDevStart"] == "2025-03-04"


def test_only_first_row_is_validated():
    out = NormalizeUploadUseCase().execute([_row(), {"abapDevelopmentTime": "3"}])
    assert len(out) == 2
    assert out[1]["abapDevelopmentTime"] == 3.0
