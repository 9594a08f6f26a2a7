"""Table settings with environment overrides."""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ct_common.config.env import parse_int_env
from ct_common.errors import TableConfigError

_ENV_FIELDS: dict[str, str] = {
    "virtualize_threshold": "CT_TABLE_VIRTUALIZE_THRESHOLD",
    "overscan": "CT_TABLE_OVERSCAN",
    "estimated_row_height": "CT_TABLE_ROW_HEIGHT",
    "viewport_height": "CT_TABLE_VIEWPORT_HEIGHT",
}


class TableSettings(BaseModel):
    """Tunables for the table controller."""

    virtualize_threshold: int = Field(default=100, ge=0)
    overscan: int = Field(default=10, ge=0)
    estimated_row_height: int = Field(default=50, gt=0)
    viewport_height: int = Field(default=600, gt=0)
    id_field: str = Field(default="id", min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def build(cls, **values: Any) -> "TableSettings":
        """Validate ``values``, raising TableConfigError on bad input."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise TableConfigError(
                "Invalid table settings", context={"values": values}, cause=exc
            ) from exc

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "TableSettings":
        """Build settings from CT_TABLE_* variables; explicit overrides win.

        Unparseable values are ignored and the default is kept.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for field, var in _ENV_FIELDS.items():
            parsed = parse_int_env(env.get(var))
            if parsed is not None:
                values[field] = parsed
        values.update({key: val for key, val in overrides.items() if val is not None})
        return cls.build(**values)
