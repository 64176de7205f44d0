"""Capability markers distinguishing resolved tracks from unresolved ones.

A marker is a private sentinel object held by a track's state. It is never a
string, so it cannot collide with a data field or be produced from plain data,
and it never shows up in a track's keys.
"""

from __future__ import annotations

from typing import Any

from tracks.errors import ArgumentMissingError


class _Marker:
    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<marker {self.name}>"


TRACK_MARKER = _Marker("track")
UNRESOLVED_MARKER = _Marker("unresolved")


def marker_of(value: Any) -> _Marker | None:
    state = getattr(value, "_state", None)
    marker = getattr(state, "marker", None)
    if marker is TRACK_MARKER or marker is UNRESOLVED_MARKER:
        return marker
    return None


def is_track(value: Any) -> bool:
    """Return whether ``value`` is a resolved track."""
    if value is None:
        raise ArgumentMissingError("Provided argument must be present.")
    return marker_of(value) is TRACK_MARKER


def is_unresolved_track(value: Any) -> bool:
    """Return whether ``value`` is an unresolved track."""
    if value is None:
        raise ArgumentMissingError("Provided argument must be present.")
    return marker_of(value) is UNRESOLVED_MARKER


def validate(value: Any) -> bool:
    """Check that ``value`` is a track or unresolved track.

    For a non-empty list or tuple every element is checked. An empty list is
    not a track and yields ``False``.
    """
    if value is None:
        raise ArgumentMissingError("Provided argument must be present.")
    if isinstance(value, (list, tuple)) and value:
        return all(marker_of(item) is not None for item in value)
    return marker_of(value) is not None
