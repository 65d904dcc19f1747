from __future__ import annotations

from typing import List, Sequence

from ..operations import Operation
from ..piece import Piece
from ..state import GameState, shift_rolls
from ..types import Action, Zone
from .base import BaseResolver


class TaxiResolver(BaseResolver):
    """Hangar -> Launch. Needs an even die and a single face-up Hangar piece."""

    action = Action.TAXI

    def resolve(
        self,
        state: GameState,
        claimed: Sequence[Piece],
        claimed_opponent: Sequence[Piece],
    ) -> List[Operation]:
        self.require_fresh_die(state)
        self.check(
            not state.rolled_three_sixes(), "A third six must be resolved as a move"
        )
        self.check(state.die % 2 == 0, f"Taxi needs an even die, rolled {state.die}")
        ids = self.claimed_ids(claimed)
        self.check(len(ids) == 1, f"Taxi moves exactly one piece, got {len(ids)}")
        self.check(not claimed_opponent, "Taxi cannot touch opponent pieces")

        piece = state.piece(state.turn, next(iter(ids)))
        self.check(
            piece.zone is Zone.HANGAR and not piece.face_down,
            f"{piece.key.wire_key} is not waiting in its Hangar",
        )
        moved = [piece.relocated(Zone.LAUNCH, 0, stacked=False, face_down=False)]
        return self.closing_operations(
            state,
            moved,
            [],
            shift_rolls(state.last_two_rolls, state.die),
            state.last_two_moves.shift(ids),
        )
