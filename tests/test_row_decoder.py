from __future__ import annotations

import pytest

from skystates.config import DecoderConfig
from skystates.decoding.rows import decode_state_vector
from skystates.decoding.schema import STATE_VECTOR_SCHEMA, FieldKind
from skystates.exceptions import FieldTypeError, MissingRequiredFieldError, RowTooShortError
from skystates.models.state_vector import PositionSource, StateVector


def _base_row() -> list:
    return ["a086d8", "FDX1869 ", "United States", 1507198218, 1507198218, -121.8445, 37.2541, 6553.2, False, 236.88, 142.23, 13.33, None, 6743.7, "6714", False, 0]


def _with(position: int, value: object) -> list:
    row = _base_row()
    row[position] = value
    return row


# ------------------------------------------------------------------
# Schema table
# ------------------------------------------------------------------


def test_schema_covers_positions_in_order() -> None:
    assert [spec.position for spec in STATE_VECTOR_SCHEMA] == list(range(17))


def test_schema_names_match_model_fields() -> None:
    assert [spec.name for spec in STATE_VECTOR_SCHEMA] == list(StateVector.model_fields)


def test_only_icao24_is_required() -> None:
    assert [spec.name for spec in STATE_VECTOR_SCHEMA if spec.required] == ["icao24"]
    assert STATE_VECTOR_SCHEMA[0].kind == FieldKind.STRING


# ------------------------------------------------------------------
# Happy path
# ------------------------------------------------------------------


def test_concrete_row() -> None:
    sv = decode_state_vector(
        ["cabeef", None, "USA", None, 1000, None, None, None, False, 4.0, 5.0, 6.0, None, None, "6714", False, 0]
    )
    assert sv == StateVector(
        icao24="cabeef",
        origin_country="USA",
        last_contact=1000.0,
        velocity=4.0,
        heading=5.0,
        vertical_rate=6.0,
        squawk="6714",
        position_source=PositionSource.ADS_B,
    )
    assert sv.callsign is None
    assert sv.serials is None
    assert sv.on_ground is False
    assert sv.spi is False


def test_integers_widened_to_float() -> None:
    sv = decode_state_vector(_base_row())
    assert isinstance(sv.last_contact, float)
    assert sv.last_contact == 1507198218.0
    assert sv.callsign == "FDX1869 "


def test_fractional_epoch_kept() -> None:
    sv = decode_state_vector(_with(3, 1507198218.25))
    assert sv.last_position_update == 1507198218.25


def test_tuple_row_accepted() -> None:
    assert decode_state_vector(tuple(_base_row())) == decode_state_vector(_base_row())


def test_to_row_round_trip() -> None:
    row = _with(12, [1234, 6543])
    sv = decode_state_vector(row + ["extra", 99])
    assert sv.to_row() == row
    assert decode_state_vector(sv.to_row()) == sv


# ------------------------------------------------------------------
# Booleans, serials, position source
# ------------------------------------------------------------------


@pytest.mark.parametrize("position, name", [(8, "on_ground"), (15, "spi")])
def test_null_flag_is_false(position: int, name: str) -> None:
    assert getattr(decode_state_vector(_with(position, None)), name) is False
    assert getattr(decode_state_vector(_with(position, True)), name) is True


@pytest.mark.parametrize("value, expected", [(None, None), ([], ()), ([1234, 6543], (1234, 6543)), ([5.0], (5,))])
def test_serials(value: object, expected: object) -> None:
    assert decode_state_vector(_with(12, value)).serials == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, PositionSource.ADS_B),
        (1, PositionSource.ASTERIX),
        (2, PositionSource.MLAT),
        (3, PositionSource.FLARM),
        (4, PositionSource.UNKNOWN),
        (8, PositionSource.UNKNOWN),
        (-1, PositionSource.UNKNOWN),
        (-7, PositionSource.UNKNOWN),
        (None, PositionSource.UNKNOWN),
        (2.0, PositionSource.MLAT),
    ],
)
def test_position_source_mapping(raw: object, expected: PositionSource) -> None:
    assert decode_state_vector(_with(16, raw)).position_source is expected


# ------------------------------------------------------------------
# Type mismatches
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "position, value",
    [
        (0, 12345),
        (1, 42),
        (2, ["USA"]),
        (3, "1507198218"),
        (5, True),
        (7, {"m": 1}),
        (8, 0),
        (8, "false"),
        (11, "fast"),
        (12, "1234"),
        (12, [1234, "6543"]),
        (12, [1.5]),
        (12, [True]),
        (13, False),
        (14, 6714),
        (15, 1),
        (16, "0"),
        (16, 1.5),
        (16, True),
    ],
)
def test_wrong_json_type_rejected(position: int, value: object) -> None:
    with pytest.raises(FieldTypeError) as exc_info:
        decode_state_vector(_with(position, value), row_index=3)
    err = exc_info.value
    assert err.position == position
    assert err.field == STATE_VECTOR_SCHEMA[position].name
    assert err.row_index == 3
    assert isinstance(err.__cause__, TypeError)


def test_number_too_large_for_float_rejected() -> None:
    with pytest.raises(FieldTypeError) as exc_info:
        decode_state_vector(_with(5, 10**400), row_index=0)
    assert exc_info.value.field == "longitude"
    assert exc_info.value.position == 5
    assert isinstance(exc_info.value.__cause__, TypeError)


@pytest.mark.parametrize("row", ["cabeef", 17, None, {"icao24": "cabeef"}])
def test_non_array_row_rejected(row: object) -> None:
    with pytest.raises(FieldTypeError):
        decode_state_vector(row)


# ------------------------------------------------------------------
# Required field and minimum length
# ------------------------------------------------------------------


def test_null_icao24() -> None:
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        decode_state_vector(_with(0, None))
    assert exc_info.value.field == "icao24"
    assert exc_info.value.position == 0


@pytest.mark.parametrize("length", [0, 1, 13, 16])
def test_short_row_rejected_by_default(length: int) -> None:
    with pytest.raises(RowTooShortError) as exc_info:
        decode_state_vector(_base_row()[:length])
    assert exc_info.value.length == length
    assert exc_info.value.min_length == 17


def test_missing_positions_default_past_minimum() -> None:
    config = DecoderConfig(min_row_length=8)
    sv = decode_state_vector(_base_row()[:8], config=config)
    assert sv.baro_altitude == 6553.2
    assert sv.on_ground is False
    assert sv.velocity is None
    assert sv.serials is None
    assert sv.spi is False
    assert sv.position_source == PositionSource.UNKNOWN


def test_minimum_applies_before_defaults() -> None:
    with pytest.raises(RowTooShortError):
        decode_state_vector(_base_row()[:7], config=DecoderConfig(min_row_length=8))


def test_icao24_only_row() -> None:
    sv = decode_state_vector(["abc123"], config=DecoderConfig(min_row_length=1))
    assert sv == StateVector(icao24="abc123")


def test_empty_row_missing_icao24_is_too_short() -> None:
    with pytest.raises(RowTooShortError):
        decode_state_vector([], config=DecoderConfig(min_row_length=1))
