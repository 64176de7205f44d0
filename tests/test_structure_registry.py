from __future__ import annotations

import pytest

from structures import registry
from structures.node import Node
from structures.player import Player
from structures.queue import Queue


def test_builtin_bindings() -> None:
    assert registry.get("queue") is Queue
    assert registry.get(registry.Role.PLAYER) is Player
    assert registry.get("Node") is Node


def test_extend_binds_transform_result() -> None:
    previous = registry.get("queue")

    def add_history(queue_cls):
        class HistoryQueue(queue_cls):
            pass

        return HistoryQueue

    extended = registry.extend("queue", add_history)

    assert registry.get("queue") is extended
    assert issubclass(extended, previous)


def test_extend_composes_repeated_transforms() -> None:
    seen = []

    def wrap(label):
        def extender(current):
            seen.append(current)
            return type(f"{label}Player", (current,), {})

        return extender

    first = registry.extend("player", wrap("First"))
    second = registry.extend("player", wrap("Second"))

    assert seen == [Player, first]
    assert registry.get("player") is second
    assert second.__mro__[1] is first


def test_extend_unknown_role() -> None:
    with pytest.raises(registry.UnknownRoleError):
        registry.extend("NotARole", lambda current: current)


def test_get_unknown_role() -> None:
    with pytest.raises(registry.UnknownRoleError):
        registry.get("manager")


def test_get_missing_structure() -> None:
    registry.extend("node", lambda current: None)

    with pytest.raises(registry.MissingStructureError):
        registry.get("node")


def test_player_builds_queue_through_registry() -> None:
    class CustomQueue(Queue):
        pass

    registry.extend("queue", lambda current: CustomQueue)

    player = Player("guild-1", node=Node(host="lavalink.local"))

    assert isinstance(player.queue, CustomQueue)


def test_player_builds_default_node_through_registry() -> None:
    class CustomNode(Node):
        pass

    registry.extend("node", lambda current: CustomNode)

    assert isinstance(Player("guild-1").node, CustomNode)
