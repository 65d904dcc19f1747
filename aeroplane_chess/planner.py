from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from . import rules
from .codec import encode_operations
from .errors import Rejection
from .operations import Operation
from .piece import Piece
from .state import GameState
from .types import Action, Zone
from .verifier import initial_operations

__all__ = ["Proposal", "initial_operations", "legal_proposals", "movable_units"]


@dataclass(slots=True)
class Proposal:
    action: Action
    piece_ids: Tuple[int, ...]
    operations: List[Operation]

    @property
    def wire_operations(self) -> List[Dict[str, object]]:
        return encode_operations(self.operations)


def _attempt(
    action: Action, state: GameState, claimed: Sequence[Piece]
) -> Optional[Proposal]:
    try:
        operations = rules.create(action).resolve(state, claimed, [])
    except Rejection as exc:
        logger.debug(f"Skipping {action.value} {[pc.piece_id for pc in claimed]}: {exc}")
        return None
    ids = tuple(sorted(pc.piece_id for pc in claimed))
    return Proposal(action=action, piece_ids=ids, operations=operations)


def movable_units(state: GameState) -> List[List[Piece]]:
    """Own pieces that can move together: single pieces or whole stacks."""
    units: List[List[Piece]] = []
    seen = set()
    for pc in state.own_pieces:
        if pc.zone is Zone.HANGAR:
            continue
        if not pc.stacked:
            units.append([pc])
        elif pc.location not in seen:
            seen.add(pc.location)
            units.append(state.pieces_at(state.turn, pc.zone, pc.space))
    return units


def legal_proposals(state: GameState) -> List[Proposal]:
    """Every operation list the mover could send that the verifier accepts.

    While a follow-up is pending only that follow-up is offered (both stack
    choices, or taking and declining a shortcut). On a fresh die the options
    are the third-six eviction, or else taxis, moves and the pass.
    """
    pending = rules.pending_follow_up(state)
    group = state.last_moved()
    candidates: List[Tuple[Action, List[Piece]]] = []

    if pending is Action.JUMP:
        candidates.append((Action.JUMP, group))
    elif pending is Action.STACK:
        lead = group[0]
        sharing = state.pieces_at(state.turn, lead.zone, lead.space)
        for stacked in (True, False):
            candidates.append(
                (
                    Action.STACK,
                    [pc.relocated(pc.zone, pc.space, stacked=stacked) for pc in sharing],
                )
            )
    elif pending is Action.TAKE_SHORTCUT:
        candidates.append((Action.TAKE_SHORTCUT, group))
        candidates.append((Action.TAKE_SHORTCUT, []))
    elif state.rolled_three_sixes():
        candidates.append((Action.MOVE, []))
    else:
        for pc in state.own_pieces:
            if pc.zone is Zone.HANGAR and not pc.face_down:
                candidates.append((Action.TAXI, [pc]))
        for unit in movable_units(state):
            candidates.append((Action.MOVE, unit))
        candidates.append((Action.MOVE, []))

    proposals = []
    for action, claimed in candidates:
        proposal = _attempt(action, state, claimed)
        if proposal is not None:
            proposals.append(proposal)
    return proposals
