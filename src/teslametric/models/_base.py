"""Base model and enum for Tesla API responses.

Every response model inherits from :class:`TeslaBaseModel` which
provides:

* Frozen instances; a fetched record never changes within a run.
* A ``model_validator(mode="before")`` that strips ``null``, empty
  strings and NaN so the field default is used.
* A ``raw`` dict that captures the original payload.

State enums inherit from :class:`TeslaEnum` which requires an
``UNKNOWN`` member and adds a ``_missing_`` hook returning it for any
value without a mapped member.
"""

from __future__ import annotations

import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Values the Tesla API uses for "not available".
_SENTINELS = frozenset({"", "NaN", "nan"})


class TeslaEnum(enum.StrEnum):
    """Base for Tesla API state enums.

    Every subclass **must** define ``UNKNOWN``. Strings the API sends
    that have no mapped member resolve to ``UNKNOWN`` instead of raising
    ``ValueError``. Lookup is case-insensitive.
    """

    @classmethod
    def _missing_(cls, value: object) -> TeslaEnum:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        unknown: TeslaEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class TeslaBaseModel(BaseModel):
    """Base for Tesla API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_tesla_values(cls, values: Any) -> Any:
        """Strip sentinel values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        original = dict(values)
        cleaned = TeslaBaseModel._clean_dict(original)

        # Keep an explicit raw= from keyword construction.
        if "raw" not in values:
            cleaned["raw"] = original
        return cleaned
