"""Registry of the overridable structures: the queue, the player and the node.

Code that instantiates a structure must look it up here on every use so that
extensions registered later are picked up.

Example::

    from structures import registry

    def add_history(Queue):
        class HistoryQueue(Queue):
            def clear(self):
                self.previous = None
                super().clear()
        return HistoryQueue

    registry.extend("queue", add_history)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Role(str, Enum):
    QUEUE = "queue"
    PLAYER = "player"
    NODE = "node"


class UnknownRoleError(LookupError):
    """The name is not one of the known structure roles."""


class MissingStructureError(LookupError):
    """No structure is bound to the role."""


_structures: dict[Role, Any] | None = None


def _bindings() -> dict[Role, Any]:
    global _structures
    if _structures is None:
        from structures.node import Node
        from structures.player import Player
        from structures.queue import Queue

        _structures = {Role.QUEUE: Queue, Role.PLAYER: Player, Role.NODE: Node}
    return _structures


def _coerce_role(name: Role | str) -> Role:
    if isinstance(name, Role):
        return name
    try:
        return Role(str(name).lower())
    except ValueError:
        raise UnknownRoleError(f"{name!r} is not a valid structure") from None


def get(name: Role | str) -> Any:
    """Return the structure currently bound to ``name``."""
    structure = _bindings().get(_coerce_role(name))
    if structure is None:
        raise MissingStructureError(f"No structure is bound to {name!r}")
    return structure


def extend(name: Role | str, extender: Callable[[Any], Any]) -> Any:
    """Replace the structure bound to ``name`` with ``extender(current)`` and return it."""
    role = _coerce_role(name)
    bindings = _bindings()
    current = bindings.get(role)
    if current is None:
        raise MissingStructureError(f"No structure is bound to {name!r}")
    extended = extender(current)
    bindings[role] = extended
    logger.debug("Extended structure role=%s with %r", role.value, extended)
    return extended
