from __future__ import annotations

from typing import ClassVar, Iterable, List, Sequence, Tuple

from loguru import logger

from ..codec import ACTION, DIE, LAST_TWO_MOVES, LAST_TWO_ROLLS, encode_piece
from ..config import config
from ..errors import Rejection
from ..operations import Operation, Set, SetRandomInteger, SetTurn
from ..piece import Piece
from ..state import EMPTY_ROLLS, GameState, MoveHistory
from ..types import Action, Zone
from .follow_up import pending_follow_up


def roll_die() -> SetRandomInteger:
    return SetRandomInteger(DIE, config.DIE_FROM, config.DIE_TO)


def piece_operations(pieces: Iterable[Piece]) -> List[Operation]:
    return [Set(pc.key.wire_key, encode_piece(pc)) for pc in pieces]


def history_operations(
    rolls: Tuple[int, int], moves: MoveHistory
) -> List[Operation]:
    return [Set(LAST_TWO_ROLLS, list(rolls)), Set(LAST_TWO_MOVES, moves.to_wire())]


class BaseResolver:
    """Base class for action resolvers with the shared turn bookkeeping.

    A resolver derives the single operation list that is legal for its action
    from the previous state and the pieces the proposal touches. It never
    compares against the proposal itself; the dispatcher does that.
    """

    action: ClassVar[Action]

    def resolve(
        self,
        state: GameState,
        claimed: Sequence[Piece],
        claimed_opponent: Sequence[Piece],
    ) -> List[Operation]:
        raise NotImplementedError

    # --- Preconditions ---
    @staticmethod
    def check(condition: bool, message: str) -> None:
        if not condition:
            raise Rejection(message)

    def require_fresh_die(self, state: GameState) -> None:
        pending = pending_follow_up(state)
        self.check(
            pending is None,
            f"Cannot {self.action.value} while a {pending.value if pending else ''} "
            f"is pending",
        )

    def require_pending(self, state: GameState) -> None:
        pending = pending_follow_up(state)
        self.check(
            pending is self.action,
            f"{self.action.value} is not available, pending follow-up is "
            f"{pending.value if pending else 'none'}",
        )

    @staticmethod
    def claimed_ids(claimed: Iterable[Piece]) -> frozenset:
        return frozenset(pc.piece_id for pc in claimed)

    # --- Shared derivations ---
    @staticmethod
    def captures_at(state: GameState, zone: Zone, space: int) -> List[Piece]:
        """Opponent pieces knocked back to their Hangar by landing on a square."""
        if not zone.is_shared:
            return []
        return [pc.sent_home() for pc in state.pieces_at(state.opponent, zone, space)]

    def passing_operations(
        self, state: GameState, moved: Sequence[Piece]
    ) -> List[Operation]:
        ops: List[Operation] = [
            SetTurn(state.opponent_id),
            roll_die(),
            Set(ACTION, self.action.value),
        ]
        ops.extend(piece_operations(moved))
        ops.extend(history_operations(EMPTY_ROLLS, MoveHistory()))
        return ops

    def closing_operations(
        self,
        state: GameState,
        moved: Sequence[Piece],
        captured: Sequence[Piece],
        rolls: Tuple[int, int],
        moves: MoveHistory,
    ) -> List[Operation]:
        """Wrap the piece updates of a sub-move in turn and history operations.

        The mover keeps the turn without a new roll while a follow-up is
        pending, keeps it with a new roll after a six, and otherwise hands it
        over with both history fields reset.
        """
        after = state.advanced(self.action, [*moved, *captured], rolls, moves)
        pending = pending_follow_up(after)
        if pending is not None:
            ops: List[Operation] = [SetTurn(state.actor_id)]
        elif state.die == config.RETAIN_TURN_ROLL:
            ops = [SetTurn(state.actor_id), roll_die()]
        else:
            ops = [SetTurn(state.opponent_id), roll_die()]
            rolls, moves = EMPTY_ROLLS, MoveHistory()
        ops.append(Set(ACTION, self.action.value))
        ops.extend(piece_operations(moved))
        ops.extend(piece_operations(captured))
        ops.extend(history_operations(rolls, moves))
        logger.debug(
            f"{self.action.value} by {state.turn.name}: moved={len(moved)} "
            f"captured={len(captured)} pending={pending.value if pending else None}"
        )
        return ops
