"""State-vector row decoder.

Turns one positional JSON array into a :class:`StateVector` by walking
:data:`~skystates.decoding.schema.STATE_VECTOR_SCHEMA`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from skystates.config import DEFAULT_CONFIG, DecoderConfig
from skystates.decoding.normalize import (
    json_type_name,
    to_flag,
    to_optional_float,
    to_optional_int_list,
    to_optional_str,
    to_position_source,
)
from skystates.decoding.schema import STATE_VECTOR_SCHEMA, FieldKind
from skystates.exceptions import FieldTypeError, MissingRequiredFieldError, RowTooShortError
from skystates.models.state_vector import StateVector

_COERCERS: dict[FieldKind, Callable[[Any], Any]] = {
    FieldKind.STRING: to_optional_str,
    FieldKind.NUMBER: to_optional_float,
    FieldKind.BOOLEAN: to_flag,
    FieldKind.INT_LIST: to_optional_int_list,
    FieldKind.POSITION_SOURCE: to_position_source,
}


def decode_state_vector(
    row: Any,
    *,
    row_index: int | None = None,
    config: DecoderConfig | None = None,
) -> StateVector:
    """Decode one state-vector row.

    Parameters
    ----------
    row : list
        Parsed JSON array.  Elements past the last documented position
        are ignored.
    row_index : int or None
        Index of the row inside ``states``; only used for error context.
    config : DecoderConfig or None
        Decoder configuration; ``min_row_length`` decides which
        positions may be missing.

    Returns
    -------
    StateVector
        The decoded record.

    Raises
    ------
    RowTooShortError
        The row has fewer than ``config.min_row_length`` elements.
    MissingRequiredFieldError
        ``icao24`` is ``null`` or missing.
    FieldTypeError
        The row is not an array, or a position holds a value of the
        wrong JSON type.
    """
    if config is None:
        config = DEFAULT_CONFIG

    if not isinstance(row, (list, tuple)):
        raise FieldTypeError(
            f"state vector must be an array, got {json_type_name(row)}",
            row_index=row_index,
        )

    length = len(row)
    if length < config.min_row_length:
        raise RowTooShortError(
            f"state vector has {length} elements, at least {config.min_row_length} required",
            length=length,
            min_length=config.min_row_length,
            row_index=row_index,
        )

    values: dict[str, Any] = {}
    for spec in STATE_VECTOR_SCHEMA:
        raw = row[spec.position] if spec.position < length else None
        if spec.required and raw is None:
            raise MissingRequiredFieldError(
                f"required field {spec.name} is null or absent",
                row_index=row_index,
                position=spec.position,
                field=spec.name,
            )
        try:
            values[spec.name] = _COERCERS[spec.kind](raw)
        except TypeError as exc:
            raise FieldTypeError(
                f"invalid {spec.name}: {exc}",
                row_index=row_index,
                position=spec.position,
                field=spec.name,
            ) from exc

    return StateVector.model_validate(values)
