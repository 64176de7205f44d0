"""Built-in queue structure."""

from __future__ import annotations

import random

from tracks.errors import ArgumentInvalidError
from tracks.markers import validate
from tracks.model import Track


class Queue(list):
    """Upcoming tracks plus the ``current`` and ``previous`` ones."""

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.current: Track | None = None
        self.previous: Track | None = None

    @property
    def size(self) -> int:
        return len(self)

    @property
    def total_size(self) -> int:
        return len(self) + (1 if self.current is not None else 0)

    @property
    def duration(self) -> int:
        """Summed duration of the current and queued tracks, in milliseconds."""
        total = (self.current.get("duration") or 0) if self.current is not None else 0
        return total + sum(track.get("duration") or 0 for track in self)

    def add(self, track: Track | list[Track], offset: int | None = None) -> None:
        """Add one or more tracks; the first fills ``current`` when it is empty."""
        if not validate(track):
            raise ArgumentInvalidError('Track must be a "Track" or "Track[]".')

        if offset is not None:
            if isinstance(offset, bool) or not isinstance(offset, int):
                raise ArgumentInvalidError("Offset must be a number.")
            if offset < 0 or offset > len(self):
                raise ArgumentInvalidError(f"Offset must be or between 0 and {len(self)}.")

        tracks = list(track) if isinstance(track, (list, tuple)) else [track]
        if self.current is None:
            self.current = tracks.pop(0)
            if not tracks:
                return

        if offset is None:
            self.extend(tracks)
            return
        self[offset:offset] = tracks

    def remove(self, start: int = 0, end: int | None = None) -> list[Track]:
        """Remove the track at ``start``, or the tracks in ``[start, end)``."""
        if end is None:
            removed = self[start:start + 1]
            del self[start:start + 1]
            return removed
        if start >= end:
            raise ArgumentInvalidError("Start can not be bigger than end.")
        if start >= len(self):
            raise ArgumentInvalidError(f"Start can not be bigger than {len(self)}.")
        removed = self[start:end]
        del self[start:end]
        return removed

    def shuffle(self) -> None:
        random.shuffle(self)
