"""Snapshot decoder.

Entry points for a whole states document:

- :func:`decode_snapshot` takes an already parsed JSON value.
- :func:`loads_snapshot` takes JSON text and parses it first.

Both are fail-fast: the first bad row aborts the decode and no partial
snapshot is returned.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from skystates._trace import truncate_for_log
from skystates.config import DEFAULT_CONFIG, DecoderConfig
from skystates.decoding.normalize import json_type_name, to_epoch_seconds
from skystates.decoding.rows import decode_state_vector
from skystates.exceptions import FieldTypeError, MalformedDocumentError, StatesDecodeError
from skystates.models.snapshot import StatesSnapshot
from skystates.models.state_vector import StateVector

_logger = logging.getLogger(__name__)


def _reject_constant(token: str) -> Any:
    # NaN and +/-Infinity are Python extensions, not JSON.
    raise ValueError(f"{token} is not a valid JSON value")


def _decode_time(document: Mapping[str, Any]) -> int:
    try:
        return to_epoch_seconds(document.get("time"))
    except TypeError as exc:
        raise FieldTypeError(f"invalid time: {exc}", field="time") from exc


def _decode_states(document: Mapping[str, Any], config: DecoderConfig) -> list[StateVector] | None:
    rows = document.get("states")
    if rows is None:
        return None
    if not isinstance(rows, (list, tuple)):
        raise FieldTypeError(f"states must be an array or null, got {json_type_name(rows)}", field="states")
    return [decode_state_vector(row, row_index=index, config=config) for index, row in enumerate(rows)]


def _trace_failure(document: Any, error: StatesDecodeError, config: DecoderConfig) -> None:
    if not _logger.isEnabledFor(logging.DEBUG):
        return
    if not config.trace_payloads:
        _logger.debug("States decode failed: %s", error)
        return
    fragment: Any = document
    if error.row_index is not None and isinstance(document, Mapping):
        fragment = document["states"][error.row_index]
    _logger.debug(
        "States decode failed: %s payload=%s",
        error,
        truncate_for_log(fragment, max_string=config.trace_max_string),
    )


def decode_snapshot(document: Any, config: DecoderConfig | None = None) -> StatesSnapshot | None:
    """Decode a parsed states document.

    Parameters
    ----------
    document : dict or None
        Parsed JSON value.  ``None`` (JSON ``null``) means "no data".
    config : DecoderConfig or None
        Decoder configuration.

    Returns
    -------
    StatesSnapshot or None
        ``None`` for a ``null`` document, otherwise the snapshot.  A
        missing ``time`` is ``0``; a missing or ``null`` ``states`` is
        ``None``.

    Raises
    ------
    MalformedDocumentError
        The document is neither an object nor ``null``.
    StatesDecodeError
        Any row (or the ``time``/``states`` members) failed to decode.
    """
    if config is None:
        config = DEFAULT_CONFIG

    if document is None:
        _logger.debug("States document is null, no snapshot")
        return None

    try:
        if not isinstance(document, Mapping):
            raise MalformedDocumentError(
                f"states document must be an object or null, got {json_type_name(document)}"
            )
        snapshot = StatesSnapshot(
            time=_decode_time(document),
            states=_decode_states(document, config),
        )
    except StatesDecodeError as err:
        _trace_failure(document, err, config)
        raise

    _logger.debug(
        "Decoded states snapshot time=%d states=%s",
        snapshot.time,
        "absent" if snapshot.states is None else len(snapshot.states),
    )
    return snapshot


def loads_snapshot(text: str | bytes | bytearray, config: DecoderConfig | None = None) -> StatesSnapshot | None:
    """Parse JSON text and decode it with :func:`decode_snapshot`.

    Raises
    ------
    MalformedDocumentError
        The text is not valid JSON (including the empty string, the
        non-standard ``NaN``/``Infinity`` tokens and integer literals
        too long to convert), or the parsed value is neither an object nor ``null``.
    """
    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedDocumentError(f"states document is not valid JSON: {exc}") from exc
    return decode_snapshot(document, config)
