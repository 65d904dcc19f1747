from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from loguru import logger

from .codec import decode_operations, decode_state, encode_operations
from .operations import EndGame, Set, SetRandomInteger, SetTurn
from .planner import Proposal, legal_proposals
from .state import GameState
from .types import Color, Verdict
from .verifier import initial_operations, verify

Roll = Callable[[int, int], int]


@dataclass(slots=True)
class AppliedMove:
    state: Dict[str, Any]
    turn: Optional[str]
    winner: Optional[str] = None


def apply_operations(
    wire_state: Mapping[str, Any], operations: Iterable[Any], roll: Roll
) -> AppliedMove:
    """Apply an accepted move to a wire state and return the next one.

    ``roll(low, high)`` supplies the value of every requested random integer,
    drawn from ``[low, high)``.
    """
    state = copy.deepcopy(dict(wire_state))
    turn: Optional[str] = None
    winner: Optional[str] = None
    for op in decode_operations(operations):
        if isinstance(op, Set):
            state[op.key] = copy.deepcopy(op.value)
        elif isinstance(op, SetRandomInteger):
            state[op.key] = roll(op.low, op.high)
        elif isinstance(op, SetTurn):
            turn = op.player_id
        elif isinstance(op, EndGame):
            winner = op.winner_id
    return AppliedMove(state=state, turn=turn, winner=winner)


@dataclass(slots=True)
class Session:
    """Runs one game, verifying every proposal before applying it."""

    player_ids: Tuple[str, str]
    roll: Roll
    state: Dict[str, Any] = field(default_factory=dict)
    turn: Optional[str] = None
    winner: Optional[str] = None
    accepted: List[Tuple[str, List[Dict[str, Any]]]] = field(default_factory=list)

    @property
    def game_over(self) -> bool:
        return self.winner is not None

    def structured_state(self) -> GameState:
        seat = list(self.player_ids).index(self.turn)
        return decode_state(self.state, Color.for_seat(seat), self.player_ids)

    def submit(self, player_id: str, operations: List[Dict[str, Any]]) -> Verdict:
        verdict = verify(self.player_ids, None, self.state, operations, player_id)
        if not verdict.accepted:
            return verdict
        applied = apply_operations(self.state, operations, self.roll)
        self.state = applied.state
        self.turn = applied.turn or self.turn
        self.winner = applied.winner
        self.accepted.append((player_id, operations))
        if self.winner is not None:
            logger.info(f"Game over after {len(self.accepted)} moves, winner {self.winner}")
        return verdict

    def play_turn(self, choose: Callable[[List[Proposal]], Proposal]) -> Verdict:
        """Let ``choose`` pick one of the current player's legal proposals."""
        if not self.state:
            return self.submit(
                self.player_ids[0],
                encode_operations(initial_operations(self.player_ids)),
            )
        if self.game_over:
            raise RuntimeError("The game is already over")
        proposals = legal_proposals(self.structured_state())
        if not proposals:
            raise RuntimeError(f"Player {self.turn} has no legal move")
        proposal = choose(proposals)
        return self.submit(self.turn, proposal.wire_operations)
