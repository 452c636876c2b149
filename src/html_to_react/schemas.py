"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

_COMPONENT_NAME = re.compile(r"^[A-Z][A-Za-z0-9_]*$")


class ConversionConfig(BaseModel):
    """Validated input for file-based HTML conversion."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    output_dir: Path
    component_name: str
    drop_inline_styles: bool = False

    @field_validator("component_name")
    @classmethod
    def _validate_component_name(cls, value: str) -> str:
        if not _COMPONENT_NAME.match(value):
            raise ValueError(
                "component_name must be a PascalCase identifier "
                "(letter first, then letters, digits or underscores)."
            )
        return value

    @field_validator("output_dir")
    @classmethod
    def _validate_output_dir(cls, value: Path) -> Path:
        if value.exists() and not value.is_dir():
            raise ValueError(f"output_dir exists and is not a directory: {value}")
        return value
