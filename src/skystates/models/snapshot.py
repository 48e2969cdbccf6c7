"""States snapshot model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from skystates.models._base import SkyBaseModel
from skystates.models.state_vector import StateVector


class StatesSnapshot(SkyBaseModel):
    """A timestamped collection of state vectors from one query.

    ``states`` is ``None`` when the document had no ``states`` member
    (or it was ``null``); an empty list means the member was present
    and empty.
    """

    time: int = 0
    states: list[StateVector] | None = None

    @property
    def timestamp(self) -> datetime:
        """``time`` as a UTC datetime."""
        return datetime.fromtimestamp(self.time, tz=UTC)

    def to_document(self) -> dict[str, Any]:
        """Re-encode the snapshot in the wire document shape."""
        states = None if self.states is None else [state.to_row() for state in self.states]
        return {"time": self.time, "states": states}
