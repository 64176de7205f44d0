"""Configuration carried by the track builder and the closest-track resolver."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from search.types import SearchProvider, SearchResult
from tracks.errors import ArgumentInvalidError, ArgumentMissingError, NotInitializedError
from tracks.partial import normalize_partial

logger = logging.getLogger(__name__)


@dataclass
class TrackContext:
    """Field whitelist and search provider used while building and resolving tracks.

    Both are meant to be configured once at startup; writes are not guarded.
    """

    partial: list[str] | None = None
    provider: SearchProvider | None = None

    def set_track_partial(self, partial: Sequence[str]) -> list[str]:
        self.partial = normalize_partial(partial)
        logger.debug("Track partial set to %s", self.partial)
        return self.partial

    def init(self, provider: SearchProvider) -> None:
        if provider is None:
            raise ArgumentMissingError('Argument "provider" must be present.')
        if not callable(getattr(provider, "search", None)) and not callable(provider):
            raise ArgumentInvalidError("Provider must be callable or expose a search() method.")
        self.provider = provider

    async def search(self, query: str, requester: Any = None) -> SearchResult:
        if self.provider is None:
            raise NotInitializedError("Search provider has not been initiated.")
        search = getattr(self.provider, "search", self.provider)
        result = search(query, requester)
        if inspect.isawaitable(result):
            result = await result
        return result


default_context = TrackContext()


def set_track_partial(partial: Sequence[str]) -> list[str]:
    """Restrict every track built from now on to the given field names."""
    return default_context.set_track_partial(partial)


def init(provider: SearchProvider) -> None:
    """Bind the search provider used to resolve unresolved tracks."""
    default_context.init(provider)
