"""Base model and enum for decoded states.

Every decoded model inherits from :class:`SkyBaseModel`, which is
frozen so a decoded snapshot can be shared between callers without
copying.

Raw-integer enums inherit from :class:`SkyEnum`, which adds a
``_missing_`` hook returning ``UNKNOWN`` for any value without a
mapped member, so converting a wire integer never raises.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


def epoch_to_datetime(value: float | None) -> datetime | None:
    """Convert epoch seconds (possibly fractional) to a UTC datetime.

    Returns ``None`` when the value is ``None``.
    """
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=UTC)


class SkyEnum(enum.IntEnum):
    """Base for enums decoded from raw wire integers.

    Every subclass **must** define ``UNKNOWN``.  Values without a
    mapped member resolve to ``UNKNOWN`` instead of raising
    ``ValueError``.
    """

    @classmethod
    def _missing_(cls, value: object) -> SkyEnum:
        # pylint: disable=no-member
        unknown: SkyEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class SkyBaseModel(BaseModel):
    """Base for decoded models: immutable, unknown keys ignored."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )
