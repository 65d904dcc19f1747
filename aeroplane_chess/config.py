import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Board constants ---
    TOTAL_SPACES: int = 52  # shared track T00..T51
    FINAL_STRETCH_SPACES: int = 6  # F00..F05, F05 is the terminal slot
    HANGAR_SPACES: int = 4
    PIECES_PER_PLAYER: int = 4
    JUMP_AMOUNT: int = 4
    SHORTCUT_AMOUNT: int = 12
    # Final-stretch slot of the crossing color that every shortcut flies over
    SHORTCUT_INTERSECTION: int = 2

    # Die values are drawn from [DIE_FROM, DIE_TO)
    DIE_FROM: int = 1
    DIE_TO: int = 7
    RETAIN_TURN_ROLL: int = 6

    # Per-color track offsets, indexed by Color (Red, Blue, Yellow, Green)
    SHORTCUT_ENTRIES: list[int] = field(default_factory=lambda: [36, 49, 10, 23])
    FINAL_STRETCH_STARTS: list[int] = field(default_factory=lambda: [16, 29, 42, 3])
    LAUNCH_STARTS: list[int] = field(default_factory=lambda: [18, 31, 44, 5])

    # Seat order -> color; the first listed player flies Red, the second Yellow
    SEAT_COLORS: list[int] = field(default_factory=lambda: [0, 2])

    PLAYER_ID_KEY: str = os.getenv("PLAYER_ID_KEY", "playerId")
    LOG_REJECTIONS: bool = bool(int(os.getenv("LOG_REJECTIONS", 1)))

    # Derived (populated in __post_init__ due to slots)
    WIN_SPACE: int = 0

    def __post_init__(self):
        self.WIN_SPACE = self.FINAL_STRETCH_SPACES - 1

        for offsets in (
            self.SHORTCUT_ENTRIES,
            self.FINAL_STRETCH_STARTS,
            self.LAUNCH_STARTS,
        ):
            if len(offsets) != 4:
                raise ValueError("Per-color offsets must list exactly 4 colors")
            if any(not 0 <= space < self.TOTAL_SPACES for space in offsets):
                raise ValueError("Per-color offsets must lie on the track")
        if len(self.SEAT_COLORS) != 2:
            raise ValueError("SEAT_COLORS must seat exactly 2 players")
        if not 1 <= self.DIE_FROM < self.DIE_TO <= 7:
            raise ValueError("Die range must lie within [1, 7)")
        # Locations are written as a zone letter plus a 2-digit index
        if self.TOTAL_SPACES > 100:
            raise ValueError("TOTAL_SPACES must fit in two digits")


config = Config()
