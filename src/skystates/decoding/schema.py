"""Positional schema of a state-vector row.

A state vector arrives as a JSON array, not an object: field identity
comes from the array index alone.  :data:`STATE_VECTOR_SCHEMA` is the
single table mapping each position to a field name and kind; the row
decoder walks it in order and nothing else hard-codes an index.

=====  ========================  =================
Pos    Field                     Kind
=====  ========================  =================
0      icao24                    string (required)
1      callsign                  string
2      origin_country            string
3      last_position_update      number
4      last_contact              number
5      longitude                 number
6      latitude                  number
7      baro_altitude             number
8      on_ground                 boolean
9      velocity                  number
10     heading                   number
11     vertical_rate             number
12     serials                   int list
13     geo_altitude              number
14     squawk                    string
15     spi                       boolean
16     position_source           position source
=====  ========================  =================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FieldKind(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    INT_LIST = "int-list"
    POSITION_SOURCE = "position-source"


@dataclass(frozen=True)
class FieldSpec:
    """One position of a state-vector row."""

    position: int
    name: str
    kind: FieldKind
    required: bool = False


STATE_VECTOR_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec(0, "icao24", FieldKind.STRING, required=True),
    FieldSpec(1, "callsign", FieldKind.STRING),
    FieldSpec(2, "origin_country", FieldKind.STRING),
    FieldSpec(3, "last_position_update", FieldKind.NUMBER),
    FieldSpec(4, "last_contact", FieldKind.NUMBER),
    FieldSpec(5, "longitude", FieldKind.NUMBER),
    FieldSpec(6, "latitude", FieldKind.NUMBER),
    FieldSpec(7, "baro_altitude", FieldKind.NUMBER),
    FieldSpec(8, "on_ground", FieldKind.BOOLEAN),
    FieldSpec(9, "velocity", FieldKind.NUMBER),
    FieldSpec(10, "heading", FieldKind.NUMBER),
    FieldSpec(11, "vertical_rate", FieldKind.NUMBER),
    FieldSpec(12, "serials", FieldKind.INT_LIST),
    FieldSpec(13, "geo_altitude", FieldKind.NUMBER),
    FieldSpec(14, "squawk", FieldKind.STRING),
    FieldSpec(15, "spi", FieldKind.BOOLEAN),
    FieldSpec(16, "position_source", FieldKind.POSITION_SOURCE),
)
