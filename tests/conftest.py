import sys
from pathlib import Path

import pytest

# Ensure tests can import project packages regardless of how pytest is invoked.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from structures import registry  # noqa: E402
from tracks import context  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_process_state(monkeypatch):
    """Give each test a fresh default context and a private copy of the structure bindings."""
    monkeypatch.setattr(context.default_context, "partial", None)
    monkeypatch.setattr(context.default_context, "provider", None)
    monkeypatch.setattr(registry, "_structures", dict(registry._bindings()))


def raw_track(
    title="Song",
    author="Artist",
    length=200000,
    identifier="abc123",
    uri="https://www.youtube.com/watch?v=abc123",
    track="QAAAjQIAJVJpY2sgQXN0bGV5",
):
    return {
        "track": track,
        "info": {
            "title": title,
            "identifier": identifier,
            "author": author,
            "length": length,
            "isSeekable": True,
            "isStream": False,
            "uri": uri,
        },
    }
