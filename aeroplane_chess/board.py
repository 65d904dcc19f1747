from __future__ import annotations

from typing import Iterable, Tuple

from .config import config
from .errors import Rejection
from .piece import Piece
from .types import Color, Zone


def _compute_shortcut_exits() -> Tuple[int, ...]:
    return tuple(
        (entry + config.SHORTCUT_AMOUNT) % config.TOTAL_SPACES
        for entry in config.SHORTCUT_ENTRIES
    )


def _compute_prior_shortcut_ends() -> Tuple[int, ...]:
    ends = []
    for color in Color:
        next_entry = config.SHORTCUT_ENTRIES[(color + 1) % len(Color)]
        ends.append((next_entry - 1) % config.TOTAL_SPACES)
    return tuple(ends)


_SHORTCUT_EXITS = _compute_shortcut_exits()
_PRIOR_SHORTCUT_ENDS = _compute_prior_shortcut_ends()


def shortcut_entry(color: int) -> int:
    return config.SHORTCUT_ENTRIES[color]


def shortcut_exit(color: int) -> int:
    return _SHORTCUT_EXITS[color]


def shortcut_end_of_prior_color(color: int) -> int:
    """Space immediately before the next color's shortcut entry.

    Shortcut entries sit 13 spaces apart, so this is also where the color's own
    shortcut lands. Pieces never jump from it.
    """
    return _PRIOR_SHORTCUT_ENDS[color]


def final_stretch_start(color: int) -> int:
    return config.FINAL_STRETCH_STARTS[color]


def launch_start(color: int) -> int:
    return config.LAUNCH_STARTS[color]


def track_space_color(space: int) -> Color:
    if not 0 <= space < config.TOTAL_SPACES:
        raise ValueError(f"Track space {space} is off the board")
    return Color(space % len(Color))


def shortcut_crossing_color(color: int) -> Color:
    """Color whose final stretch is crossed by ``color``'s shortcut."""
    return Color((color + 2) % len(Color))


def is_jump_available(color: int, zone: Zone, space: int) -> bool:
    if zone is not Zone.TRACK:
        return False
    return (
        track_space_color(space) == color
        and space != shortcut_entry(color)
        and space != shortcut_end_of_prior_color(color)
        and space != final_stretch_start(color)
    )


def is_shortcut_available(color: int, zone: Zone, space: int) -> bool:
    return zone is Zone.TRACK and space == shortcut_entry(color)


def is_stack_available(zone: Zone, space: int, others: Iterable[Piece]) -> bool:
    if zone not in (Zone.TRACK, Zone.FINAL_STRETCH):
        return False
    return any(pc.location == (zone, space) for pc in others)


def is_terminal(zone: Zone, space: int) -> bool:
    return zone is Zone.FINAL_STRETCH and space == config.WIN_SPACE


def advance(color: int, zone: Zone, space: int, die: int) -> tuple[Zone, int]:
    """Destination of a regular move of ``die`` spaces.

    Track pieces turn into their final stretch at ``final_stretch_start``.
    A roll that overshoots the terminal slot bounces back off it by the
    overshoot, so the terminal slot (``config.WIN_SPACE``) is reachable only by
    an exact roll.
    """
    if zone is Zone.LAUNCH:
        return Zone.TRACK, (launch_start(color) + die) % config.TOTAL_SPACES

    if zone is Zone.TRACK:
        to_stretch = (final_stretch_start(color) - space) % config.TOTAL_SPACES
        if die <= to_stretch:
            return Zone.TRACK, (space + die) % config.TOTAL_SPACES
        target = die - to_stretch - 1
    elif zone is Zone.FINAL_STRETCH:
        target = space + die
    else:
        raise Rejection(f"Pieces in zone {zone.name} cannot move")

    if target > config.WIN_SPACE:
        target = 2 * config.WIN_SPACE - target
    return Zone.FINAL_STRETCH, target
