"""Track handle shared by resolved and unresolved tracks."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from tracks.errors import ArgumentInvalidError
from tracks.markers import TRACK_MARKER, UNRESOLVED_MARKER


class Resolved:
    """State of a playable track."""

    __slots__ = ("fields",)
    marker = TRACK_MARKER

    def __init__(self, fields: dict[str, Any]) -> None:
        self.fields = fields


class Unresolved:
    """State of a placeholder awaiting a search lookup."""

    __slots__ = ("fields", "resolver")
    marker = UNRESOLVED_MARKER

    def __init__(self, fields: dict[str, Any], resolver: Callable[[Track], Awaitable[Track]]) -> None:
        self.fields = fields
        self.resolver = resolver


class Track:
    """Handle over a resolved or unresolved track state.

    Fields are read as attributes (``track.title``) or items
    (``track["title"]``). Resolving an unresolved handle swaps its state in
    place, so every holder of the handle sees the resolved fields afterwards.
    """

    __slots__ = ("_state",)

    def __init__(self, state: Resolved | Unresolved) -> None:
        self._state = state

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._state.fields[name]
        except KeyError:
            raise AttributeError(f"Track has no field {name!r}") from None

    def __getitem__(self, key: str) -> Any:
        return self._state.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._state.fields

    def get(self, key: str, default: Any = None) -> Any:
        return self._state.fields.get(key, default)

    def keys(self) -> list[str]:
        return list(self._state.fields)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._state.fields)

    async def resolve(self) -> None:
        """Look the track up through its search provider and become the closest match."""
        state = self._state
        if state.marker is not UNRESOLVED_MARKER:
            raise ArgumentInvalidError("Provided track is not a UnresolvedTrack.")
        resolved = await state.resolver(self)
        self._state = Resolved(resolved.to_dict())

    def __repr__(self) -> str:
        kind = "Track" if self._state.marker is TRACK_MARKER else "UnresolvedTrack"
        title = self.get("title")
        if title is None:
            return f"<{kind} track={self.get('track')!r}>"
        return f"<{kind} title={title!r} duration={self.get('duration')!r}>"
