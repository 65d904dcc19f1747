from __future__ import annotations

from typing import List, Sequence

from ..operations import Operation
from ..piece import Piece
from ..state import GameState
from ..types import Action
from .base import BaseResolver


class StackResolver(BaseResolver):
    """Stack or unstack every own piece on the square the mover just reached.

    Stacking never relocates and is all-or-none: the claim names each own
    piece on the square with the same ``stacked`` value. Stacking folds all of
    them into the latest move-history entry; unstacking leaves history alone.
    """

    action = Action.STACK

    def resolve(
        self,
        state: GameState,
        claimed: Sequence[Piece],
        claimed_opponent: Sequence[Piece],
    ) -> List[Operation]:
        self.require_pending(state)
        self.check(bool(claimed), "Stacking needs at least one piece")
        self.check(not claimed_opponent, "Stacking cannot touch opponent pieces")

        lead = state.last_moved()[0]
        sharing = state.pieces_at(state.turn, lead.zone, lead.space)
        sharing_ids = frozenset(pc.piece_id for pc in sharing)
        self.check(
            self.claimed_ids(claimed) == sharing_ids,
            f"Every piece on the square must be claimed, expected {sorted(sharing_ids)}",
        )
        for pc in claimed:
            self.check(
                pc.location == lead.location and not pc.face_down,
                f"{pc.key.wire_key} cannot change square while stacking",
            )
        flags = {pc.stacked for pc in claimed}
        self.check(len(flags) == 1, "Pieces on one square are all stacked or none")
        stacked = flags.pop()

        moved = [pc.relocated(pc.zone, pc.space, stacked=stacked) for pc in sharing]
        moves = state.last_two_moves
        if stacked:
            moves = moves.replace_latest(sharing_ids)
        return self.closing_operations(state, moved, [], state.last_two_rolls, moves)
