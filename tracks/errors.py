"""Errors raised while building, validating and resolving tracks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from search.types import Severity, TrackException


class TrackError(Exception):
    """Base class for every track subsystem failure."""


class ArgumentMissingError(TrackError, ValueError):
    """A required argument was not provided."""


class ArgumentInvalidError(TrackError, ValueError):
    """An argument has the wrong shape or type."""


class TrackConstructionError(TrackError, ValueError):
    """Raw search data could not be turned into a track."""


class NotInitializedError(TrackError, RuntimeError):
    """The resolver was used before a search provider was bound."""


class NoMatchError(TrackError, LookupError):
    """The search provider returned no usable search result.

    ``exception`` holds the provider payload, or the default
    ``"No tracks found."`` payload when the provider supplied none.
    """

    def __init__(self, exception: TrackException) -> None:
        super().__init__(exception.message)
        self.exception = exception

    @property
    def severity(self) -> Severity:
        return self.exception.severity
