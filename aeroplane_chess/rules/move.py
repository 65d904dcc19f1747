from __future__ import annotations

from typing import List, Sequence

from loguru import logger

from .. import board
from ..codec import ACTION
from ..config import config
from ..operations import EndGame, Operation, Set, SetTurn
from ..piece import Piece
from ..state import GameState, shift_rolls
from ..types import Action, Zone
from .base import BaseResolver, piece_operations


class MoveResolver(BaseResolver):
    """Moves one piece, or one whole stack, by the die.

    A third six in a row overrides the claim: every unfinished piece moved on
    the two previous sixes returns to its Hangar and the turn passes. An empty
    claim is a pass, legal only when nothing can leave the Hangar on an odd die.
    """

    action = Action.MOVE

    def resolve(
        self,
        state: GameState,
        claimed: Sequence[Piece],
        claimed_opponent: Sequence[Piece],
    ) -> List[Operation]:
        self.require_fresh_die(state)
        if state.rolled_three_sixes():
            return self._evict(state)

        ids = self.claimed_ids(claimed)
        rolls = shift_rolls(state.last_two_rolls, state.die)
        if not ids:
            self.check(
                state.die % 2 == 1
                and all(pc.zone is Zone.HANGAR for pc in state.own_pieces),
                "Passing is only allowed on an odd die with every piece in the Hangar",
            )
            return self.closing_operations(
                state, [], [], rolls, state.last_two_moves.shift(ids)
            )

        unit = self._unit(state, ids)
        lead = unit[0]
        zone, space = board.advance(state.turn, lead.zone, lead.space, state.die)
        if board.is_terminal(zone, space):
            moved = [pc.sent_home(face_down=True) for pc in unit]
        else:
            moved = [pc.relocated(zone, space) for pc in unit]

        finished = {pc.key for pc in moved if pc.is_finished}
        finished.update(pc.key for pc in state.own_pieces if pc.is_finished)
        if len(finished) == config.PIECES_PER_PLAYER:
            return self._win(state, moved)

        captured = self.captures_at(state, zone, space)
        return self.closing_operations(
            state, moved, captured, rolls, state.last_two_moves.shift(ids)
        )

    def _unit(self, state: GameState, ids: frozenset) -> List[Piece]:
        pieces = [state.piece(state.turn, i) for i in sorted(ids)]
        for pc in pieces:
            self.check(
                pc.zone is not Zone.HANGAR,
                f"{pc.key.wire_key} is in the Hangar and cannot move",
            )
        if len(pieces) == 1:
            self.check(
                not pieces[0].stacked,
                f"{pieces[0].key.wire_key} is stacked and must move with its stack",
            )
            return pieces

        lead = pieces[0]
        self.check(
            all(pc.stacked for pc in pieces),
            "Only stacked pieces can move together",
        )
        self.check(
            all(pc.location == lead.location for pc in pieces),
            "Stacked pieces must share a square",
        )
        sharing = state.pieces_at(state.turn, lead.zone, lead.space)
        self.check(
            len(sharing) == len(pieces), "A stack must move as a whole"
        )
        return pieces

    def _evict(self, state: GameState) -> List[Operation]:
        ids = state.last_two_moves.all_ids
        moved = [
            pc.sent_home()
            for pc in state.own_pieces
            if pc.piece_id in ids and not pc.is_finished
        ]
        logger.debug(
            f"Third six for {state.turn.name}: returning {sorted(ids)} to the Hangar"
        )
        return self.passing_operations(state, moved)

    def _win(self, state: GameState, moved: Sequence[Piece]) -> List[Operation]:
        logger.info(f"Player {state.actor_id} ({state.turn.name}) brought every piece home")
        ops: List[Operation] = [
            SetTurn(state.actor_id),
            Set(ACTION, self.action.value),
        ]
        ops.extend(piece_operations(moved))
        ops.append(EndGame(state.actor_id))
        return ops
