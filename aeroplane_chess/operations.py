from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(slots=True)
class Set:
    key: str
    value: Any


@dataclass(slots=True)
class SetTurn:
    player_id: str


@dataclass(slots=True)
class SetRandomInteger:
    key: str
    low: int  # inclusive
    high: int  # exclusive


@dataclass(slots=True)
class EndGame:
    winner_id: str


Operation = Union[Set, SetTurn, SetRandomInteger, EndGame]
OPERATION_TYPES = (Set, SetTurn, SetRandomInteger, EndGame)
