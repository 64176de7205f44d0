"""Search provider contract and provider implementations."""

from search.types import (
    LoadType,
    PlaylistInfo,
    SearchProvider,
    SearchResult,
    Severity,
    TrackData,
    TrackDataInfo,
    TrackException,
)

__all__ = [
    "LoadType",
    "PlaylistInfo",
    "SearchProvider",
    "SearchResult",
    "Severity",
    "TrackData",
    "TrackDataInfo",
    "TrackException",
]
