from __future__ import annotations

from typing import Optional

from .. import board
from ..state import GameState
from ..types import Action, Zone


def pending_follow_up(state: GameState) -> Optional[Action]:
    """Return the follow-up action the mover owes before the die is fresh again.

    The pieces named by the latest move-history entry sit together on one
    square. Depending on how they got there they may now have to jump, may
    (un)stack with the other own pieces on that square, or may take their
    shortcut. Only one follow-up is pending at a time; ``None`` means the next
    action consumes the die.
    """
    group = state.last_moved()
    if not group:
        return None

    color = state.turn
    zone, space = group[0].location
    others = [pc for pc in state.own_pieces if pc not in group]
    can_stack = board.is_stack_available(zone, space, others)
    can_jump = board.is_jump_available(color, zone, space)
    can_shortcut = board.is_shortcut_available(color, zone, space)

    if state.action is Action.MOVE:
        if can_jump:
            return Action.JUMP
        if can_stack:
            return Action.STACK
        if can_shortcut:
            return Action.TAKE_SHORTCUT
    elif state.action is Action.JUMP:
        if can_stack:
            return Action.STACK
        if can_shortcut:
            return Action.TAKE_SHORTCUT
    elif state.action is Action.STACK:
        if can_shortcut:
            return Action.TAKE_SHORTCUT
    elif state.action is Action.TAKE_SHORTCUT:
        # A declined shortcut leaves the pieces on the entry square
        taken = zone is Zone.TRACK and space == board.shortcut_exit(color)
        if taken and can_stack:
            return Action.STACK
    return None
