"""skystates - Typed decoder for aviation states snapshots."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("skystates")
except PackageNotFoundError:
    __version__ = "0+local"
from skystates.config import DecoderConfig
from skystates.decoding import decode_snapshot, decode_state_vector, loads_snapshot
from skystates.exceptions import (
    DecodeErrorKind,
    FieldTypeError,
    MalformedDocumentError,
    MissingRequiredFieldError,
    RowTooShortError,
    SkyStatesConfigError,
    SkyStatesError,
    StatesDecodeError,
)
from skystates.models import PositionSource, StatesSnapshot, StateVector

__all__ = [
    "__version__",
    "DecodeErrorKind",
    "DecoderConfig",
    "FieldTypeError",
    "MalformedDocumentError",
    "MissingRequiredFieldError",
    "PositionSource",
    "RowTooShortError",
    "SkyStatesConfigError",
    "SkyStatesError",
    "StateVector",
    "StatesDecodeError",
    "StatesSnapshot",
    "decode_snapshot",
    "decode_state_vector",
    "loads_snapshot",
]
