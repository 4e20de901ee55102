"""Pydantic v2 models for bff configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SnapshotConfig(BaseModel):
    directory: str = "/tmp/bff_buffers"
    atomic: bool = True


class DisplayConfig(BaseModel):
    number_width: int = Field(default=4, ge=1)
    pad_char: str = "0"

    @field_validator("pad_char")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("pad_char must be a single character")
        return value


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    json_output: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}


class BffConfig(BaseModel):
    """Root configuration model for bff."""

    snapshots: SnapshotConfig = Field(default_factory=SnapshotConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
