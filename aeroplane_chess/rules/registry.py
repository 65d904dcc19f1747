from __future__ import annotations

from typing import Dict, Type

from ..types import Action
from .base import BaseResolver
from .jump import JumpResolver
from .move import MoveResolver
from .shortcut import TakeShortcutResolver
from .stack import StackResolver
from .taxi import TaxiResolver

RESOLVER_REGISTRY: Dict[Action, Type[BaseResolver]] = {
    TaxiResolver.action: TaxiResolver,
    MoveResolver.action: MoveResolver,
    StackResolver.action: StackResolver,
    JumpResolver.action: JumpResolver,
    TakeShortcutResolver.action: TakeShortcutResolver,
}


def create(action: Action | str) -> BaseResolver:
    try:
        key = Action(action)
    except ValueError:
        raise KeyError(f"Unknown action '{action}'.") from None
    cls = RESOLVER_REGISTRY.get(key)
    if cls is None:
        raise KeyError(f"No resolver for action '{key.value}'.")
    return cls()


def available() -> Dict[str, Type[BaseResolver]]:
    return {action.value: cls for action, cls in RESOLVER_REGISTRY.items()}
