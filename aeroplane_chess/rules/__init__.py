from .base import BaseResolver
from .follow_up import pending_follow_up
from .jump import JumpResolver
from .move import MoveResolver
from .registry import RESOLVER_REGISTRY, available, create
from .shortcut import TakeShortcutResolver
from .stack import StackResolver
from .taxi import TaxiResolver

__all__ = [
    "BaseResolver",
    "pending_follow_up",
    "TaxiResolver",
    "MoveResolver",
    "StackResolver",
    "JumpResolver",
    "TakeShortcutResolver",
    "RESOLVER_REGISTRY",
    "available",
    "create",
]
