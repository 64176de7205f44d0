"""Overridable structures and their registry."""

from structures.registry import MissingStructureError, Role, UnknownRoleError, extend, get

__all__ = ["MissingStructureError", "Role", "UnknownRoleError", "extend", "get"]
