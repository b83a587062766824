"""Renderer settings models."""

from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RendererSettings(BaseModel):
    """Options controlling how a configuration is rendered."""
    emit_sequences: bool = Field(
        default=False,
        description="Emit include, mount and address lists one line per element",
    )
    mapping_order: Literal["insertion", "sorted"] = Field(default="insertion")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    model_config = ConfigDict(extra="ignore")
