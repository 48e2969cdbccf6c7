"""Custom exception hierarchy for skystates."""

from __future__ import annotations

from enum import StrEnum


class DecodeErrorKind(StrEnum):
    """Category of a states decode failure."""

    MALFORMED_DOCUMENT = "malformed-document"
    MISSING_REQUIRED_FIELD = "missing-required-field"
    ROW_TOO_SHORT = "row-too-short"
    TYPE_MISMATCH = "type-mismatch"


class SkyStatesError(Exception):
    """Base exception for all skystates errors."""


class SkyStatesConfigError(SkyStatesError):
    """Invalid decoder configuration."""


class StatesDecodeError(SkyStatesError):
    """A states document could not be decoded.

    Carries enough context to locate the failure: the row inside
    ``states`` (``row_index``), the array position within that row
    (``position``) and the field name.  Any of these is ``None`` when it
    does not apply, e.g. a malformed top-level document has neither.
    """

    kind: DecodeErrorKind = DecodeErrorKind.MALFORMED_DOCUMENT

    def __init__(
        self,
        message: str,
        *,
        row_index: int | None = None,
        position: int | None = None,
        field: str | None = None,
    ) -> None:
        self.row_index = row_index
        self.position = position
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        location = []
        if self.row_index is not None:
            location.append(f"row={self.row_index}")
        if self.position is not None:
            location.append(f"position={self.position}")
        if self.field is not None:
            location.append(f"field={self.field}")
        if not location:
            return f"[{self.kind}] {message}"
        return f"[{self.kind}] {message} ({', '.join(location)})"


class MalformedDocumentError(StatesDecodeError):
    """Top-level value is neither an object nor ``null``, or not JSON at all."""

    kind = DecodeErrorKind.MALFORMED_DOCUMENT


class MissingRequiredFieldError(StatesDecodeError):
    """A required field (``icao24``) is ``null`` or absent."""

    kind = DecodeErrorKind.MISSING_REQUIRED_FIELD


class RowTooShortError(StatesDecodeError):
    """A state-vector row does not reach the minimum accepted length.

    ``length`` is the number of elements the row actually had and
    ``min_length`` the configured minimum.
    """

    kind = DecodeErrorKind.ROW_TOO_SHORT

    def __init__(
        self,
        message: str,
        *,
        length: int,
        min_length: int,
        row_index: int | None = None,
    ) -> None:
        self.length = length
        self.min_length = min_length
        super().__init__(message, row_index=row_index, position=length)


class FieldTypeError(StatesDecodeError):
    """A value has a JSON type incompatible with its field."""

    kind = DecodeErrorKind.TYPE_MISMATCH
