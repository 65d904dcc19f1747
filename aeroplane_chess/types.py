from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .config import config


class Color(IntEnum):
    RED = 0
    BLUE = 1
    YELLOW = 2
    GREEN = 3

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def for_seat(cls, seat: int) -> "Color":
        return cls(config.SEAT_COLORS[seat])

    @classmethod
    def from_letter(cls, letter: str) -> "Color":
        for color in cls:
            if color.letter == letter:
                return color
        raise ValueError(f"Unknown color letter '{letter}'")


class Zone(Enum):
    HANGAR = "H"
    LAUNCH = "L"
    TRACK = "T"
    FINAL_STRETCH = "F"

    @property
    def capacity(self) -> int:
        """Number of addressable spaces in the zone."""
        if self is Zone.HANGAR:
            return config.HANGAR_SPACES
        if self is Zone.LAUNCH:
            return 1
        if self is Zone.TRACK:
            return config.TOTAL_SPACES
        return config.FINAL_STRETCH_SPACES

    @property
    def is_shared(self) -> bool:
        return self is Zone.TRACK


class Action(str, Enum):
    INITIALIZE = "initialize"
    TAXI = "taxi"
    MOVE = "move"
    STACK = "stack"
    JUMP = "jump"
    TAKE_SHORTCUT = "take_shortcut"


@dataclass(slots=True)
class Verdict:
    accepted: bool
    hacker_player_id: Optional[str] = None
    message: str = ""

    @classmethod
    def accept(cls) -> "Verdict":
        return cls(accepted=True)

    @classmethod
    def reject(cls, player_id: str, message: str) -> "Verdict":
        return cls(accepted=False, hacker_player_id=player_id, message=message)
