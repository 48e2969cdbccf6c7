"""Decoder configuration for skystates."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from skystates._constants import STATE_VECTOR_FIELD_COUNT
from skystates.exceptions import SkyStatesConfigError

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def _env_flag(env_key: str, value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise SkyStatesConfigError(f"{env_key} must be a boolean flag, got {value!r}")


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise SkyStatesConfigError(f"{env_key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class DecoderConfig:
    """Decoder configuration.

    Parameters
    ----------
    min_row_length : int
        Minimum number of elements a state-vector row must have.  Rows
        shorter than this are rejected.  Positions at or beyond it may
        be missing and take their default (``None`` for nullable
        fields, ``False`` for ``on_ground``/``spi``, ``UNKNOWN`` for the
        position source).  Must be between 1 and 17; defaults to 17,
        i.e. every documented position is mandatory.
    trace_payloads : bool
        Include a truncated copy of the offending payload in DEBUG logs
        when a decode fails.
    trace_max_string : int
        Maximum length of any string in a traced payload.
    """

    min_row_length: int = STATE_VECTOR_FIELD_COUNT
    trace_payloads: bool = False
    trace_max_string: int = 256

    def __post_init__(self) -> None:
        if isinstance(self.min_row_length, bool) or not isinstance(self.min_row_length, int):
            raise SkyStatesConfigError(f"min_row_length must be an integer, got {self.min_row_length!r}")
        if not 1 <= self.min_row_length <= STATE_VECTOR_FIELD_COUNT:
            raise SkyStatesConfigError(
                f"min_row_length must be between 1 and {STATE_VECTOR_FIELD_COUNT}, got {self.min_row_length}"
            )
        if isinstance(self.trace_max_string, bool) or not isinstance(self.trace_max_string, int):
            raise SkyStatesConfigError(f"trace_max_string must be an integer, got {self.trace_max_string!r}")
        if self.trace_max_string < 1:
            raise SkyStatesConfigError(f"trace_max_string must be positive, got {self.trace_max_string}")

    @classmethod
    def from_env(cls, **overrides: Any) -> DecoderConfig:
        """Create configuration from environment variables.

        Reads ``SKYSTATES_MIN_ROW_LENGTH``, ``SKYSTATES_TRACE_PAYLOADS``
        and ``SKYSTATES_TRACE_MAX_STRING``.  Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        DecoderConfig
            Populated configuration.

        Raises
        ------
        SkyStatesConfigError
            If an integer or flag variable cannot be parsed or a value is
            out of range.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        min_length_env = env.get("SKYSTATES_MIN_ROW_LENGTH")
        if min_length_env is not None and "min_row_length" not in overrides:
            config_kwargs["min_row_length"] = _env_int("SKYSTATES_MIN_ROW_LENGTH", min_length_env)

        if "trace_payloads" not in overrides:
            config_kwargs["trace_payloads"] = _env_flag(
                "SKYSTATES_TRACE_PAYLOADS",
                env.get("SKYSTATES_TRACE_PAYLOADS"),
                False,
            )

        max_string_env = env.get("SKYSTATES_TRACE_MAX_STRING")
        if max_string_env is not None and "trace_max_string" not in overrides:
            config_kwargs["trace_max_string"] = _env_int("SKYSTATES_TRACE_MAX_STRING", max_string_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = DecoderConfig()
