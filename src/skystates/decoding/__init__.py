"""Decoding layer.

Turns parsed states documents into :mod:`skystates.models` values.
"""

from skystates.decoding.rows import decode_state_vector
from skystates.decoding.schema import STATE_VECTOR_SCHEMA, FieldKind, FieldSpec
from skystates.decoding.snapshot import decode_snapshot, loads_snapshot

__all__ = [
    "FieldKind",
    "FieldSpec",
    "STATE_VECTOR_SCHEMA",
    "decode_snapshot",
    "decode_state_vector",
    "loads_snapshot",
]
