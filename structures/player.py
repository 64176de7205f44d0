"""Built-in player structure."""

from __future__ import annotations

import logging

from structures import registry
from tracks.errors import ArgumentInvalidError, ArgumentMissingError
from tracks.markers import is_unresolved_track, validate
from tracks.model import Track

logger = logging.getLogger(__name__)


class Player:
    """Playback state for one guild, with a queue taken from the registry."""

    def __init__(self, guild_id: str, *, node=None, volume: int = 100) -> None:
        if not guild_id:
            raise ArgumentMissingError('Argument "guild_id" must be present.')
        self.guild_id = guild_id
        self.node = node if node is not None else registry.get(registry.Role.NODE)()
        self.queue = registry.get(registry.Role.QUEUE)()
        self.volume = 100
        self.playing = False
        self.paused = False
        self.position = 0
        self.set_volume(volume)

    async def play(self, track: Track | None = None) -> Track:
        """Start the given track, or the queue's current one, resolving it first if needed."""
        if track is not None:
            if not validate(track):
                raise ArgumentInvalidError('Track must be a "Track" or "UnresolvedTrack".')
            if self.queue.current is not None:
                self.queue.previous = self.queue.current
            self.queue.current = track
        if self.queue.current is None:
            raise ArgumentMissingError("No current track.")

        current = self.queue.current
        if is_unresolved_track(current):
            await current.resolve()

        self.playing = True
        self.paused = False
        self.position = 0
        logger.info("Player guild=%s playing title=%r", self.guild_id, current.get("title"))
        return current

    def stop(self) -> Track | None:
        """Finish the current track and move the next queued one into place."""
        self.queue.previous = self.queue.current
        self.queue.current = self.queue.pop(0) if self.queue else None
        self.playing = False
        self.position = 0
        return self.queue.current

    def pause(self, paused: bool) -> None:
        if not isinstance(paused, bool):
            raise ArgumentInvalidError('Argument "paused" must be a boolean.')
        if self.paused == paused or not self.queue.total_size:
            return
        self.paused = paused
        self.playing = not paused

    def set_volume(self, volume: int) -> None:
        if isinstance(volume, bool) or not isinstance(volume, (int, float)):
            raise ArgumentInvalidError("Volume must be a number.")
        self.volume = int(max(min(volume, 1000), 0))
