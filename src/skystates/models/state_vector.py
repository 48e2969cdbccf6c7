"""State vector model.

One aircraft's instantaneous position, velocity and status as reported
in a states snapshot.  Field order on the wire is documented in
:mod:`skystates.decoding.schema`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from skystates.models._base import SkyBaseModel, SkyEnum, epoch_to_datetime


class PositionSource(SkyEnum):
    """Data link that produced the state vector's position."""

    UNKNOWN = -1
    ADS_B = 0
    ASTERIX = 1
    MLAT = 2
    FLARM = 3


class StateVector(SkyBaseModel):
    """Decoded state vector.

    Optional fields are ``None`` when the row carried ``null`` in that
    position (or, for positions past the configured minimum row length,
    when the position was missing).  ``serials`` distinguishes ``None``
    (no receiver list) from ``()`` (an empty one).

    Parameters
    ----------
    icao24 : str
        ICAO 24-bit transponder address as a hex string.
    callsign : str or None
        Callsign, as broadcast (may carry trailing blanks).
    origin_country : str or None
        Country inferred from the ICAO address.
    last_position_update : float or None
        Epoch seconds of the last position update.
    last_contact : float or None
        Epoch seconds of the last message received from the transponder.
    longitude, latitude : float or None
        WGS-84 position in degrees.
    baro_altitude : float or None
        Barometric altitude in meters.
    on_ground : bool
        Whether the position came from a surface position report.
    velocity : float or None
        Ground speed in m/s.
    heading : float or None
        True track in degrees clockwise from north.
    vertical_rate : float or None
        Vertical rate in m/s; positive means climbing.
    serials : tuple[int, ...] or None
        IDs of the receivers that contributed to this state vector.
    geo_altitude : float or None
        Geometric altitude in meters.
    squawk : str or None
        Transponder code.
    spi : bool
        Special purpose indicator.
    position_source : PositionSource
        Origin of the position.
    """

    icao24: str
    callsign: str | None = None
    origin_country: str | None = None
    last_position_update: float | None = None
    last_contact: float | None = None
    longitude: float | None = None
    latitude: float | None = None
    baro_altitude: float | None = None
    on_ground: bool = False
    velocity: float | None = None
    heading: float | None = None
    vertical_rate: float | None = None
    serials: tuple[int, ...] | None = None
    geo_altitude: float | None = None
    squawk: str | None = None
    spi: bool = False
    position_source: PositionSource = Field(default=PositionSource.UNKNOWN)

    @field_validator("position_source", mode="before")
    @classmethod
    def _coerce_position_source(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return PositionSource(value)
        return value

    @property
    def last_contact_at(self) -> datetime | None:
        """``last_contact`` as a UTC datetime."""
        return epoch_to_datetime(self.last_contact)

    @property
    def last_position_update_at(self) -> datetime | None:
        """``last_position_update`` as a UTC datetime."""
        return epoch_to_datetime(self.last_position_update)

    def to_row(self) -> list[Any]:
        """Re-encode this state vector as a 17-element wire row.

        Numbers come back as floats and ``position_source`` as its enum
        value, so a raw source outside the known range is re-encoded as
        ``-1``.
        """
        # Import lazily: the decoding package depends on the models.
        from skystates.decoding.schema import STATE_VECTOR_SCHEMA

        row: list[Any] = []
        for spec in STATE_VECTOR_SCHEMA:
            value = getattr(self, spec.name)
            if isinstance(value, PositionSource):
                value = int(value)
            elif isinstance(value, tuple):
                value = list(value)
            row.append(value)
        return row
