"""Track model, builders, closest-track resolution and duration helpers."""

from tracks.builder import build, build_unresolved, display_thumbnail
from tracks.context import TrackContext, default_context, init, set_track_partial
from tracks.duration import format_time, parse_time
from tracks.errors import (
    ArgumentInvalidError,
    ArgumentMissingError,
    NoMatchError,
    NotInitializedError,
    TrackConstructionError,
    TrackError,
)
from tracks.markers import is_track, is_unresolved_track, validate
from tracks.model import Track
from tracks.resolver import get_closest_track

__all__ = [
    "ArgumentInvalidError",
    "ArgumentMissingError",
    "NoMatchError",
    "NotInitializedError",
    "Track",
    "TrackConstructionError",
    "TrackContext",
    "TrackError",
    "build",
    "build_unresolved",
    "default_context",
    "display_thumbnail",
    "format_time",
    "get_closest_track",
    "init",
    "is_track",
    "is_unresolved_track",
    "parse_time",
    "set_track_partial",
    "validate",
]
