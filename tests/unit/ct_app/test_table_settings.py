"""Tests for TableSettings defaults, validation and environment overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ct_app.table.settings import TableSettings
from ct_common.errors import TableConfigError

pytestmark = pytest.mark.unit_table


def test_defaults() -> None:
    settings = TableSettings()
    assert settings.virtualize_threshold == 100
    assert settings.overscan == 10
    assert settings.estimated_row_height == 50
    assert settings.viewport_height == 600
    assert settings.id_field == "id"


def test_build_wraps_validation_errors() -> None:
    with pytest.raises(TableConfigError) as excinfo:
        TableSettings.build(estimated_row_height=0)
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_unknown_fields_rejected() -> None:
    with pytest.raises(TableConfigError):
        TableSettings.build(row_height=40)


def test_settings_are_frozen() -> None:
    settings = TableSettings()
    with pytest.raises(ValidationError):
        settings.overscan = 3


def test_from_env_reads_variables() -> None:
    settings = TableSettings.from_env(
        {
            "CT_TABLE_VIRTUALIZE_THRESHOLD": "20",
            "CT_TABLE_OVERSCAN": "2",
            "CT_TABLE_ROW_HEIGHT": "32",
            "CT_TABLE_VIEWPORT_HEIGHT": "400",
        }
    )
    assert settings.virtualize_threshold == 20
    assert settings.overscan == 2
    assert settings.estimated_row_height == 32
    assert settings.viewport_height == 400


def test_from_env_ignores_garbage_and_prefers_overrides() -> None:
    settings = TableSettings.from_env(
        {"CT_TABLE_OVERSCAN": "lots", "CT_TABLE_VIRTUALIZE_THRESHOLD": "20"},
        virtualize_threshold=5,
        overscan=None,
    )
    assert settings.overscan == 10
    assert settings.virtualize_threshold == 5


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CT_TABLE_ROW_HEIGHT", "44")
    assert TableSettings.from_env().estimated_row_height == 44


def test_from_env_rejects_invalid_values() -> None:
    with pytest.raises(TableConfigError):
        TableSettings.from_env({"CT_TABLE_VIEWPORT_HEIGHT": "-5"})
