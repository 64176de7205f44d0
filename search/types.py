"""Search provider contract: load types, results and raw track payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Protocol, TypedDict, Union

if TYPE_CHECKING:
    from tracks.model import Track


class LoadType(str, Enum):
    TRACK_LOADED = "TRACK_LOADED"
    PLAYLIST_LOADED = "PLAYLIST_LOADED"
    SEARCH_RESULT = "SEARCH_RESULT"
    LOAD_FAILED = "LOAD_FAILED"
    NO_MATCHES = "NO_MATCHES"


class Severity(str, Enum):
    COMMON = "COMMON"
    SUSPICIOUS = "SUSPICIOUS"
    FAULT = "FAULT"


class TrackDataInfo(TypedDict):
    title: str
    identifier: str
    author: str
    length: int
    isSeekable: bool
    isStream: bool
    uri: str


class TrackData(TypedDict):
    """Raw track record as returned by the search backend."""

    track: str
    info: TrackDataInfo


@dataclass
class TrackException:
    message: str
    severity: Severity = Severity.COMMON
    cause: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any] | None) -> TrackException | None:
        if not payload:
            return None
        try:
            severity = Severity(payload.get("severity") or Severity.COMMON)
        except ValueError:
            severity = Severity.FAULT
        return cls(
            message=payload.get("message") or "",
            severity=severity,
            cause=payload.get("cause"),
        )


@dataclass
class PlaylistInfo:
    name: str
    selected_track: Track | None
    duration: int


@dataclass
class SearchResult:
    load_type: LoadType
    tracks: list[Track] = field(default_factory=list)
    exception: TrackException | None = None
    playlist: PlaylistInfo | None = None


class SearchProvider(Protocol):
    def search(self, query: str, requester: Any = None) -> Union[SearchResult, Awaitable[SearchResult]]:
        raise NotImplementedError
