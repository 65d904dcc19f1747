from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from .config import config
from .errors import StateFormatError
from .piece import Piece
from .types import Action, Color, Zone

EMPTY_ROLLS: Tuple[int, int] = (-1, -1)


def shift_rolls(rolls: Tuple[int, int], die: int) -> Tuple[int, int]:
    return die, rolls[0]


@dataclass(frozen=True, slots=True)
class MoveHistory:
    """Piece ids moved in the two most recent sub-moves of the current turn.

    ``shift`` records a newly rolled sub-move; ``replace_latest`` rewrites the
    most recent entry, which is how stacking merges the ids sharing a square.
    On the wire each entry is a string of ascending piece-id digits.
    """

    latest: frozenset = frozenset()
    previous: frozenset = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.latest and not self.previous

    @property
    def all_ids(self) -> frozenset:
        return self.latest | self.previous

    def shift(self, piece_ids: Iterable[int]) -> "MoveHistory":
        return MoveHistory(frozenset(piece_ids), self.latest)

    def replace_latest(self, piece_ids: Iterable[int]) -> "MoveHistory":
        return MoveHistory(frozenset(piece_ids), self.previous)

    def to_wire(self) -> List[str]:
        return [self._encode(self.latest), self._encode(self.previous)]

    @classmethod
    def from_wire(cls, entries: Sequence[str]) -> "MoveHistory":
        if isinstance(entries, str) or len(entries) != 2:
            raise StateFormatError(f"Move history must hold 2 entries: {entries!r}")
        return cls(cls._decode(entries[0]), cls._decode(entries[1]))

    @staticmethod
    def _encode(piece_ids: frozenset) -> str:
        return "".join(str(i) for i in sorted(piece_ids))

    @staticmethod
    def _decode(entry: str) -> frozenset:
        if not isinstance(entry, str):
            raise StateFormatError(f"Move history entry must be a string: {entry!r}")
        ids = []
        for ch in entry:
            if not ch.isdigit() or int(ch) >= config.PIECES_PER_PLAYER:
                raise StateFormatError(f"Bad piece id '{ch}' in move history")
            ids.append(int(ch))
        if len(set(ids)) != len(ids) or ids != sorted(ids):
            raise StateFormatError(f"Move history entry '{entry}' is not canonical")
        return frozenset(ids)


@dataclass(slots=True)
class GameState:
    """Structured view of the authoritative wire state for one verification."""

    turn: Color
    player_ids: Tuple[str, str]
    die: int
    action: Action
    pieces: Dict[Color, Tuple[Piece, ...]]
    last_two_rolls: Tuple[int, int] = EMPTY_ROLLS
    last_two_moves: MoveHistory = field(default_factory=MoveHistory)

    # --- Seats ---
    @property
    def colors(self) -> Tuple[Color, Color]:
        return Color.for_seat(0), Color.for_seat(1)

    @property
    def opponent(self) -> Color:
        first, second = self.colors
        return second if self.turn == first else first

    def player_id(self, color: Color) -> str:
        return self.player_ids[self.colors.index(color)]

    @property
    def actor_id(self) -> str:
        return self.player_id(self.turn)

    @property
    def opponent_id(self) -> str:
        return self.player_id(self.opponent)

    # --- Pieces ---
    def pieces_of(self, color: Color) -> Tuple[Piece, ...]:
        return self.pieces[color]

    @property
    def own_pieces(self) -> Tuple[Piece, ...]:
        return self.pieces[self.turn]

    @property
    def opponent_pieces(self) -> Tuple[Piece, ...]:
        return self.pieces[self.opponent]

    def piece(self, color: Color, piece_id: int) -> Piece:
        return self.pieces[color][piece_id]

    def pieces_at(self, color: Color, zone: Zone, space: int) -> List[Piece]:
        return [pc for pc in self.pieces[color] if pc.location == (zone, space)]

    def last_moved(self) -> List[Piece]:
        ids = self.last_two_moves.latest
        return [pc for pc in self.own_pieces if pc.piece_id in ids]

    # --- History ---
    def rolled_three_sixes(self) -> bool:
        six = config.RETAIN_TURN_ROLL
        return self.die == six and self.last_two_rolls == (six, six)

    def advanced(
        self,
        action: Action,
        updated: Iterable[Piece],
        rolls: Tuple[int, int],
        moves: MoveHistory,
    ) -> "GameState":
        """Return the state after a sub-move, leaving this one untouched."""
        replacements = {pc.key: pc for pc in updated}
        pieces = {
            color: tuple(replacements.get(pc.key, pc) for pc in group)
            for color, group in self.pieces.items()
        }
        return GameState(
            turn=self.turn,
            player_ids=self.player_ids,
            die=self.die,
            action=action,
            pieces=pieces,
            last_two_rolls=rolls,
            last_two_moves=moves,
        )
