from __future__ import annotations

from typing import List, Sequence

from .. import board
from ..config import config
from ..operations import Operation
from ..piece import Piece
from ..state import GameState
from ..types import Action, Zone
from .base import BaseResolver


class TakeShortcutResolver(BaseResolver):
    """Fly the pieces on the shortcut entry across to the shortcut exit.

    An empty claim declines the shortcut. Taking it captures opponents on the
    exit square and, when the crossed final stretch belongs to the opponent,
    opponents waiting on its intersection slot.
    """

    action = Action.TAKE_SHORTCUT

    def resolve(
        self,
        state: GameState,
        claimed: Sequence[Piece],
        claimed_opponent: Sequence[Piece],
    ) -> List[Operation]:
        self.require_pending(state)
        rolls, moves = state.last_two_rolls, state.last_two_moves
        if not claimed:
            self.check(
                not claimed_opponent, "Declining a shortcut cannot touch opponent pieces"
            )
            return self.closing_operations(state, [], [], rolls, moves)

        self.check(
            self.claimed_ids(claimed) == moves.latest,
            f"Only the pieces just moved can take the shortcut, expected {sorted(moves.latest)}",
        )
        exit_space = board.shortcut_exit(state.turn)
        moved = [pc.relocated(Zone.TRACK, exit_space) for pc in state.last_moved()]

        captured = self.captures_at(state, Zone.TRACK, exit_space)
        crossed = board.shortcut_crossing_color(state.turn)
        if crossed == state.opponent:
            captured.extend(
                pc.sent_home()
                for pc in state.pieces_at(
                    crossed, Zone.FINAL_STRETCH, config.SHORTCUT_INTERSECTION
                )
            )
        return self.closing_operations(state, moved, captured, rolls, moves)
