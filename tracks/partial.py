"""Field whitelist applied to freshly built tracks."""

from __future__ import annotations

from typing import Any, Sequence

from tracks.errors import ArgumentInvalidError

REQUIRED_FIELD = "track"


def normalize_partial(partial: Sequence[str]) -> list[str]:
    if not isinstance(partial, (list, tuple)) or not all(isinstance(name, str) for name in partial):
        raise ArgumentInvalidError("Provided partial is not an array or not a string array.")
    names = list(partial)
    if REQUIRED_FIELD not in names:
        names.insert(0, REQUIRED_FIELD)
    return names


def project(fields: dict[str, Any], partial: Sequence[str] | None) -> dict[str, Any]:
    if partial is None:
        return fields
    allowed = set(partial)
    return {key: value for key, value in fields.items() if key in allowed}
