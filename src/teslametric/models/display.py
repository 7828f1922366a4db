"""LaMetric display frames and payload."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormatterPolicy(enum.Enum):
    """Frame layout used by :func:`teslametric.formatter.format_telemetry`."""

    FIXED = "fixed"
    """Always three frames; charging only swaps the battery icon."""
    VARIABLE = "variable"
    """Three base frames plus three charge-session frames while charging."""


class DisplayFrame(BaseModel):
    """A single text + icon frame of a LaMetric indicator app."""

    model_config = ConfigDict(frozen=True)

    text: str
    icon: str
    index: int | None = Field(default=None, ge=0)


class DisplayPayload(BaseModel):
    """Ordered, non-empty set of frames pushed in one update."""

    model_config = ConfigDict(frozen=True)

    frames: tuple[DisplayFrame, ...] = Field(min_length=1)

    @field_validator("frames", mode="before")
    @classmethod
    def _coerce_frames(cls, value: Any) -> Any:
        if isinstance(value, list):
            return tuple(value)
        return value

    @property
    def texts(self) -> list[str]:
        return [frame.text for frame in self.frames]

    def to_request_body(self) -> dict[str, Any]:
        """Serialize as the ``{"frames": [...]}`` body of a widget update."""
        return self.model_dump(mode="json", exclude_none=True)
