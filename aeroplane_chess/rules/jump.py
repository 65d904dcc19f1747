from __future__ import annotations

from typing import List, Sequence

from ..config import config
from ..operations import Operation
from ..piece import Piece
from ..state import GameState
from ..types import Action, Zone
from .base import BaseResolver


class JumpResolver(BaseResolver):
    action = Action.JUMP

    def resolve(
        self,
        state: GameState,
        claimed: Sequence[Piece],
        claimed_opponent: Sequence[Piece],
    ) -> List[Operation]:
        self.require_pending(state)
        latest = state.last_two_moves.latest
        self.check(
            self.claimed_ids(claimed) == latest,
            f"Only the pieces just moved can jump, expected {sorted(latest)}",
        )

        group = state.last_moved()
        space = (group[0].space + config.JUMP_AMOUNT) % config.TOTAL_SPACES
        moved = [pc.relocated(Zone.TRACK, space) for pc in group]
        captured = self.captures_at(state, Zone.TRACK, space)
        return self.closing_operations(
            state, moved, captured, state.last_two_rolls, state.last_two_moves
        )
