from .config import config
from .errors import LocationFormatError, Rejection, StateFormatError, VerificationError
from .operations import EndGame, Set, SetRandomInteger, SetTurn
from .piece import Piece, PieceKey
from .planner import Proposal, legal_proposals
from .session import AppliedMove, Session, apply_operations
from .state import GameState, MoveHistory
from .types import Action, Color, Verdict, Zone
from .verifier import initial_operations, verify

__all__ = [
    "config",
    "Action",
    "Color",
    "Zone",
    "Verdict",
    "Piece",
    "PieceKey",
    "GameState",
    "MoveHistory",
    "Set",
    "SetTurn",
    "SetRandomInteger",
    "EndGame",
    "VerificationError",
    "Rejection",
    "StateFormatError",
    "LocationFormatError",
    "verify",
    "initial_operations",
    "legal_proposals",
    "Proposal",
    "Session",
    "AppliedMove",
    "apply_operations",
]
