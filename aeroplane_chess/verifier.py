from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from . import rules
from .codec import (
    ACTION,
    LAST_TWO_MOVES,
    LAST_TWO_ROLLS,
    EMPTY_MOVES,
    decode_operations,
    decode_piece,
    decode_state,
    hangar_piece,
    parse_piece_key,
    piece_key,
)
from .config import config
from .errors import Rejection, VerificationError
from .operations import Operation, Set, SetTurn
from .piece import Piece
from .rules.base import roll_die
from .state import EMPTY_ROLLS, GameState
from .types import Action, Color, Verdict


def player_ids_of(players: Iterable[Any]) -> List[str]:
    """Accept per-player info records or bare ids."""
    ids = []
    for player in players:
        if isinstance(player, Mapping):
            ids.append(player[config.PLAYER_ID_KEY])
        else:
            ids.append(player)
    return ids


def initial_operations(player_ids: Sequence[str]) -> List[Operation]:
    """The board set-up move: every piece face up in its Hangar slot."""
    ops: List[Operation] = [
        SetTurn(player_ids[0]),
        roll_die(),
        Set(ACTION, Action.INITIALIZE.value),
    ]
    for seat in range(len(player_ids)):
        color = Color.for_seat(seat)
        for piece_id in range(config.PIECES_PER_PLAYER):
            ops.append(Set(piece_key(color, piece_id), hangar_piece(piece_id)))
    ops.append(Set(LAST_TWO_ROLLS, list(EMPTY_ROLLS)))
    ops.append(Set(LAST_TWO_MOVES, list(EMPTY_MOVES)))
    return ops


def declared_action(proposed: Sequence[Operation]) -> Action:
    tags = [op.value for op in proposed if isinstance(op, Set) and op.key == ACTION]
    if len(tags) != 1:
        raise Rejection(f"A move declares exactly one action, found {len(tags)}")
    try:
        return Action(tags[0])
    except ValueError:
        raise Rejection(f"Unknown action {tags[0]!r}") from None


def split_claims(
    state: GameState, proposed: Sequence[Operation]
) -> Tuple[List[Piece], List[Piece]]:
    """Decode the piece updates of a proposal into own and opponent claims."""
    own: List[Piece] = []
    opponent: List[Piece] = []
    for op in proposed:
        if not isinstance(op, Set):
            continue
        key = parse_piece_key(op.key)
        if key is None:
            continue
        if key.color == state.turn:
            own.append(decode_piece(op.value, key.piece_id, key.color))
        elif key.color == state.opponent:
            opponent.append(decode_piece(op.value, key.piece_id, key.color))
        else:
            raise Rejection(f"{op.key} does not belong to a seated player")
    return own, opponent


def expected_operations(
    player_ids: Sequence[str],
    previous_state: Mapping[str, Any],
    proposed: Sequence[Operation],
    acting_player_id: str,
) -> List[Operation]:
    """Derive the only operation list the acting player may legally send."""
    if acting_player_id not in player_ids:
        raise Rejection(f"Player {acting_player_id} is not seated in this game")

    if not previous_state:
        if acting_player_id != player_ids[0]:
            raise Rejection("Only the first player sets up the board")
        return initial_operations(player_ids)

    action = declared_action(proposed)
    if action is Action.INITIALIZE:
        raise Rejection("The board is already set up")

    turn = Color.for_seat(list(player_ids).index(acting_player_id))
    state = decode_state(previous_state, turn, player_ids)
    claimed, claimed_opponent = split_claims(state, proposed)
    logger.debug(
        f"Routing {action.value} by {turn.name}: claimed={len(claimed)} "
        f"opponent={len(claimed_opponent)}"
    )
    try:
        resolver = rules.create(action)
    except KeyError as exc:
        raise Rejection(str(exc)) from exc
    return resolver.resolve(state, claimed, claimed_opponent)


def verify(
    players: Iterable[Any],
    resulting_state: Optional[Mapping[str, Any]],
    previous_state: Optional[Mapping[str, Any]],
    operations: Iterable[Any],
    acting_player_id: str,
) -> Verdict:
    """Accept ``operations`` only if they are the unique legal move.

    ``resulting_state`` is what the client claims the board becomes; it is
    accepted for interface compatibility but never trusted. Every failure,
    including undecodable input, is reported as a rejection that blames the
    acting player.
    """
    try:
        player_ids = player_ids_of(players)
        if len(player_ids) != 2:
            raise Rejection(f"Expected 2 players, got {len(player_ids)}")
        proposed = decode_operations(operations)
        expected = expected_operations(
            player_ids, previous_state or {}, proposed, acting_player_id
        )
        if expected != proposed:
            raise Rejection(f"Expected operations {expected} but got {proposed}")
    except (VerificationError, KeyError, TypeError, ValueError) as exc:
        message = f"{type(exc).__name__}: {exc}"
        if config.LOG_REJECTIONS:
            logger.warning(f"Rejected move by player {acting_player_id}: {message}")
        return Verdict.reject(acting_player_id, message)

    logger.debug(f"Accepted {len(proposed)} operations from player {acting_player_id}")
    return Verdict.accept()
