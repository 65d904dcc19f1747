from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .types import Color, Zone


@dataclass(frozen=True, slots=True)
class PieceKey:
    """Immutable identity of a piece: its color and its id within that color."""

    color: Color
    piece_id: int  # 0..3 per player

    @property
    def wire_key(self) -> str:
        return f"{self.color.letter}{self.piece_id}"


@dataclass(slots=True, eq=False)
class Piece:
    """Lightweight piece model. Holds state only.

    Two pieces compare equal when they share a key, whatever their location.
    Rule logic (destinations, captures, stacking) lives in the board and the
    resolvers, and every change produces a new Piece through ``relocated``.
    """

    key: PieceKey
    zone: Zone = Zone.HANGAR
    space: int = 0
    stacked: bool = False
    face_down: bool = False

    @property
    def color(self) -> Color:
        return self.key.color

    @property
    def piece_id(self) -> int:
        return self.key.piece_id

    @property
    def location(self) -> tuple[Zone, int]:
        return self.zone, self.space

    @property
    def is_finished(self) -> bool:
        return self.zone is Zone.HANGAR and self.face_down

    def relocated(
        self,
        zone: Zone,
        space: int,
        *,
        stacked: Optional[bool] = None,
        face_down: Optional[bool] = None,
    ) -> "Piece":
        return replace(
            self,
            zone=zone,
            space=space,
            stacked=self.stacked if stacked is None else stacked,
            face_down=self.face_down if face_down is None else face_down,
        )

    def sent_home(self, face_down: bool = False) -> "Piece":
        """Return this piece in its own Hangar slot, unstacked."""
        return self.relocated(
            Zone.HANGAR, self.piece_id, stacked=False, face_down=face_down
        )

    def same_attributes(self, other: "Piece") -> bool:
        return (
            self.key == other.key
            and self.location == other.location
            and self.stacked == other.stacked
            and self.face_down == other.face_down
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
