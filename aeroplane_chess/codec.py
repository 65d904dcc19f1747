"""Conversion between the wire representation and the structured model.

The wire state is a flat mapping::

    {
        "die": 4,
        "action": "move",
        "R0": ["T07", "unstacked", "faceup"], ..., "Y3": [...],
        "lastTwoRolls": [4, -1],
        "lastTwoMoves": ["0", ""],
    }

Operations travel as small dicts tagged by ``type``. This module is the only
place that reads or writes ``<Zone><2-digit index>`` location strings.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import config
from .errors import LocationFormatError, StateFormatError
from .operations import (
    OPERATION_TYPES,
    EndGame,
    Operation,
    Set,
    SetRandomInteger,
    SetTurn,
)
from .piece import Piece, PieceKey
from .state import EMPTY_ROLLS, GameState, MoveHistory
from .types import Action, Color, Zone

# State keys
DIE = "die"
ACTION = "action"
LAST_TWO_ROLLS = "lastTwoRolls"
LAST_TWO_MOVES = "lastTwoMoves"

# Piece tags
STACKED = "stacked"
UNSTACKED = "unstacked"
FACE_UP = "faceup"
FACE_DOWN = "facedown"

EMPTY_MOVES: List[str] = ["", ""]

# Operation type tags
SET = "Set"
SET_TURN = "SetTurn"
SET_RANDOM_INTEGER = "SetRandomInteger"
END_GAME = "EndGame"


# --- Locations ---
def parse_location(text: str) -> Tuple[Zone, int]:
    if not isinstance(text, str) or len(text) != 3:
        raise LocationFormatError(f"Malformed location {text!r}")
    try:
        zone = Zone(text[0])
    except ValueError:
        raise LocationFormatError(f"Unknown zone in location {text!r}") from None
    suffix = text[1:]
    if not (suffix.isascii() and suffix.isdigit()):
        raise LocationFormatError(f"Location index of {text!r} is not numeric")
    space = int(suffix)
    if space >= zone.capacity:
        raise LocationFormatError(f"Location {text!r} is outside its zone")
    return zone, space


def format_location(zone: Zone, space: int) -> str:
    return f"{zone.value}{space:02d}"


# --- Pieces ---
def piece_key(color: Color, piece_id: int) -> str:
    return PieceKey(color, piece_id).wire_key


def parse_piece_key(key: str) -> Optional[PieceKey]:
    """Return the PieceKey named by a state key such as ``"Y2"``, if any."""
    if not isinstance(key, str) or len(key) != 2 or not key[1].isdigit():
        return None
    piece_id = int(key[1])
    if piece_id >= config.PIECES_PER_PLAYER:
        return None
    try:
        color = Color.from_letter(key[0])
    except ValueError:
        return None
    return PieceKey(color, piece_id)


def decode_piece(triple: Sequence[str], piece_id: int, color: Color) -> Piece:
    if isinstance(triple, str) or not isinstance(triple, Sequence) or len(triple) != 3:
        raise StateFormatError(f"Piece {piece_key(color, piece_id)} is malformed: {triple!r}")
    location, stacked_tag, face_tag = triple
    zone, space = parse_location(location)
    if stacked_tag not in (STACKED, UNSTACKED):
        raise StateFormatError(f"Unknown stacked tag {stacked_tag!r}")
    if face_tag not in (FACE_UP, FACE_DOWN):
        raise StateFormatError(f"Unknown facing tag {face_tag!r}")
    # Hangar slots are per piece and the terminal slot is never occupied
    if zone is Zone.HANGAR and space != piece_id:
        raise StateFormatError(f"Piece {piece_key(color, piece_id)} is in slot {location}")
    if zone is Zone.FINAL_STRETCH and space == config.WIN_SPACE:
        raise StateFormatError(f"Piece {piece_key(color, piece_id)} sits on the terminal slot")
    if face_tag == FACE_DOWN and zone is not Zone.HANGAR:
        raise StateFormatError(f"Only Hangar pieces can be face down, not {location}")
    if stacked_tag == STACKED and zone not in (Zone.TRACK, Zone.FINAL_STRETCH):
        raise StateFormatError(f"Pieces cannot be stacked at {location}")
    return Piece(
        key=PieceKey(Color(color), piece_id),
        zone=zone,
        space=space,
        stacked=stacked_tag == STACKED,
        face_down=face_tag == FACE_DOWN,
    )


def encode_piece(piece: Piece) -> List[str]:
    return [
        format_location(piece.zone, piece.space),
        STACKED if piece.stacked else UNSTACKED,
        FACE_DOWN if piece.face_down else FACE_UP,
    ]


def hangar_piece(piece_id: int, face_down: bool = False) -> List[str]:
    return [
        format_location(Zone.HANGAR, piece_id),
        UNSTACKED,
        FACE_DOWN if face_down else FACE_UP,
    ]


# --- States ---
def _decode_die(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise StateFormatError(f"Die must be an integer: {value!r}")
    if not config.DIE_FROM <= value < config.DIE_TO:
        raise StateFormatError(f"Die value {value} is out of range")
    return value


def _decode_rolls(value: Any) -> Tuple[int, int]:
    if isinstance(value, str) or not isinstance(value, Sequence) or len(value) != 2:
        raise StateFormatError(f"Roll history must hold 2 entries: {value!r}")
    for roll in value:
        if roll != EMPTY_ROLLS[0]:
            _decode_die(roll)
    return int(value[0]), int(value[1])


def decode_state(
    wire: Mapping[str, Any], turn_color: Color, player_ids: Sequence[str]
) -> GameState:
    if len(player_ids) != 2:
        raise StateFormatError(f"Expected 2 players, got {len(player_ids)}")
    seats = (Color.for_seat(0), Color.for_seat(1))
    if turn_color not in seats:
        raise StateFormatError(f"{Color(turn_color).name} is not seated")
    try:
        die = _decode_die(wire[DIE])
        action = Action(wire[ACTION])
        rolls = _decode_rolls(wire[LAST_TWO_ROLLS])
        moves = MoveHistory.from_wire(wire[LAST_TWO_MOVES])
        pieces = {
            color: tuple(
                decode_piece(wire[piece_key(color, i)], i, color)
                for i in range(config.PIECES_PER_PLAYER)
            )
            for color in seats
        }
    except KeyError as exc:
        raise StateFormatError(f"State is missing key {exc}") from exc
    except ValueError as exc:
        if isinstance(exc, StateFormatError):
            raise
        raise StateFormatError(str(exc)) from exc
    return GameState(
        turn=Color(turn_color),
        player_ids=(player_ids[0], player_ids[1]),
        die=die,
        action=action,
        pieces=pieces,
        last_two_rolls=rolls,
        last_two_moves=moves,
    )


def encode_state(state: GameState) -> Dict[str, Any]:
    wire: Dict[str, Any] = {DIE: state.die, ACTION: state.action.value}
    for color in state.colors:
        for pc in state.pieces_of(color):
            wire[pc.key.wire_key] = encode_piece(pc)
    wire[LAST_TWO_ROLLS] = list(state.last_two_rolls)
    wire[LAST_TWO_MOVES] = state.last_two_moves.to_wire()
    return wire


# --- Operations ---
def _normalise(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_normalise(v) for v in value]
    return value


def encode_operation(op: Operation) -> Dict[str, Any]:
    if isinstance(op, Set):
        return {"type": SET, "key": op.key, "value": _normalise(op.value)}
    if isinstance(op, SetTurn):
        return {"type": SET_TURN, "playerId": op.player_id}
    if isinstance(op, SetRandomInteger):
        return {"type": SET_RANDOM_INTEGER, "key": op.key, "from": op.low, "to": op.high}
    if isinstance(op, EndGame):
        return {"type": END_GAME, "winnerId": op.winner_id}
    raise StateFormatError(f"Unknown operation {op!r}")


def decode_operation(raw: Any) -> Operation:
    if isinstance(raw, Set):
        return Set(raw.key, _normalise(raw.value))
    if isinstance(raw, OPERATION_TYPES):
        return raw
    if not isinstance(raw, Mapping):
        raise StateFormatError(f"Operation must be a mapping: {raw!r}")
    kind = raw.get("type")
    try:
        if kind == SET:
            return Set(raw["key"], _normalise(raw["value"]))
        if kind == SET_TURN:
            return SetTurn(raw["playerId"])
        if kind == SET_RANDOM_INTEGER:
            return SetRandomInteger(raw["key"], raw["from"], raw["to"])
        if kind == END_GAME:
            return EndGame(raw["winnerId"])
    except KeyError as exc:
        raise StateFormatError(f"{kind} operation is missing {exc}") from exc
    raise StateFormatError(f"Unknown operation type {kind!r}")


def decode_operations(raw_operations: Iterable[Any]) -> List[Operation]:
    if isinstance(raw_operations, (str, Mapping)):
        raise StateFormatError("Operations must be a list")
    return [decode_operation(raw) for raw in raw_operations]


def encode_operations(operations: Iterable[Operation]) -> List[Dict[str, Any]]:
    return [encode_operation(op) for op in operations]
