"""Pydantic schemas for runtime validation of build inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BuildConfig(BaseModel):
    """Validated input for a manual-page build."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path
    destination_dir: Path
    markdown_program: str = Field(min_length=1)
    docbook_program: str = Field(min_length=1)
    docbook_stylesheet: str = Field(min_length=1)
    dependency_prefix: str

    @field_validator("markdown_program", "docbook_program", "docbook_stylesheet")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value cannot be blank.")
        return value

    @field_validator("dependency_prefix")
    @classmethod
    def _validate_single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("dependency_prefix must fit on a single line.")
        return value
