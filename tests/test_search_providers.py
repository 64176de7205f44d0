from __future__ import annotations

import asyncio
from typing import Any

import pytest

from conftest import raw_track
from search.lavalink import LavalinkSearchProvider, search_identifier, search_result_from_payload
from search.types import LoadType, Severity
from search.ytdlp import YtDlpSearchProvider, entry_to_track_data
from structures.node import Node
from tracks import ArgumentInvalidError, TrackContext, build_unresolved, init, is_track


class _FakeResponse:
    def __init__(self, status_code: int, payload: dict[str, Any]) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> dict[str, Any]:
        return self._payload


def test_search_identifier_prefixes_queries() -> None:
    assert search_identifier("never gonna") == "ytsearch:never gonna"
    assert search_identifier("never gonna", "soundcloud") == "scsearch:never gonna"
    assert search_identifier("https://youtu.be/abc") == "https://youtu.be/abc"
    with pytest.raises(ArgumentInvalidError):
        search_identifier("song", "bandcamp")


def test_node_make_request_sends_password(monkeypatch) -> None:
    calls = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append((url, params, headers, timeout))
        return _FakeResponse(200, {"loadType": "NO_MATCHES", "tracks": []})

    monkeypatch.setattr("structures.node.requests.get", fake_get)
    node = Node(host="lavalink.local", port=2333, password="secret", secure=False, request_timeout=3)

    payload = node.load_tracks("ytsearch:song")

    assert payload["loadType"] == "NO_MATCHES"
    assert calls == [
        ("http://lavalink.local:2333/loadtracks", {"identifier": "ytsearch:song"}, {"Authorization": "secret"}, 3)
    ]


def test_node_make_request_raises_on_http_error(monkeypatch) -> None:
    monkeypatch.setattr("structures.node.requests.get", lambda *args, **kwargs: _FakeResponse(401, {}))

    with pytest.raises(RuntimeError, match="401"):
        Node(host="lavalink.local").load_tracks("ytsearch:song")


def test_search_result_from_playlist_payload() -> None:
    payload = {
        "loadType": "PLAYLIST_LOADED",
        "playlistInfo": {"name": "Mix", "selectedTrack": 1},
        "tracks": [raw_track(identifier="a", length=1000), raw_track(identifier="b", length=2500)],
    }

    result = search_result_from_payload(payload, requester="user-1")

    assert result.load_type is LoadType.PLAYLIST_LOADED
    assert [track.identifier for track in result.tracks] == ["a", "b"]
    assert all(track.requester == "user-1" for track in result.tracks)
    assert result.playlist.name == "Mix"
    assert result.playlist.selected_track is result.tracks[1]
    assert result.playlist.duration == 3500


def test_search_result_from_failed_payload() -> None:
    payload = {
        "loadType": "LOAD_FAILED",
        "tracks": [],
        "exception": {"message": "Unavailable", "severity": "SUSPICIOUS", "cause": "blocked"},
    }

    result = search_result_from_payload(payload)

    assert result.tracks == []
    assert result.exception.message == "Unavailable"
    assert result.exception.severity is Severity.SUSPICIOUS
    assert result.playlist is None


def test_lavalink_provider_resolves_unresolved_track(monkeypatch) -> None:
    node = Node(host="lavalink.local")
    identifiers = []

    def fake_load_tracks(identifier):
        identifiers.append(identifier)
        return {
            "loadType": "SEARCH_RESULT",
            "tracks": [
                raw_track(author="Cover Band", title="Song live", identifier="cover"),
                raw_track(author="Artist - Topic", title="Song", identifier="topic"),
            ],
        }

    monkeypatch.setattr(node, "load_tracks", fake_load_tracks)
    init(LavalinkSearchProvider(node))
    unresolved = build_unresolved({"title": "Song", "author": "Artist"}, requester="user-2")

    asyncio.run(unresolved.resolve())

    assert identifiers == ["ytsearch:Artist - Song"]
    assert is_track(unresolved) is True
    assert unresolved.identifier == "topic"
    assert unresolved.requester == "user-2"


def test_lavalink_provider_applies_its_context_partial(monkeypatch) -> None:
    node = Node(host="lavalink.local")
    monkeypatch.setattr(
        node, "load_tracks", lambda identifier: {"loadType": "SEARCH_RESULT", "tracks": [raw_track()]}
    )
    context = TrackContext()
    context.set_track_partial(["title"])

    result = asyncio.run(LavalinkSearchProvider(node, context=context).search("song"))

    assert result.tracks[0].keys() == ["track", "title"]


def test_entry_to_track_data() -> None:
    entry = {
        "id": "abc123",
        "webpage_url": "https://www.youtube.com/watch?v=abc123",
        "title": "Song",
        "uploader": "Artist",
        "duration": 212.4,
    }

    data = entry_to_track_data(entry)

    assert data == {
        "track": "https://www.youtube.com/watch?v=abc123",
        "info": {
            "title": "Song",
            "identifier": "abc123",
            "author": "Artist",
            "length": 212400,
            "isSeekable": True,
            "isStream": False,
            "uri": "https://www.youtube.com/watch?v=abc123",
        },
    }
    assert entry_to_track_data({"webpage_url": "bandcampsearch5:song", "title": "Song"}) is None
    assert entry_to_track_data({"webpage_url": "https://example.com/x"}) is None


def test_ytdlp_provider_builds_search_result(monkeypatch) -> None:
    provider = YtDlpSearchProvider(limit=2)
    monkeypatch.setattr(
        provider,
        "_extract",
        lambda query: [
            {"id": "a", "webpage_url": "https://www.youtube.com/watch?v=a", "title": "Song", "uploader": "Artist"},
            {"id": "b", "url": "ytsearch2:song", "title": "Internal"},
        ],
    )

    result = asyncio.run(provider.search("song", requester="user-3"))

    assert result.load_type is LoadType.SEARCH_RESULT
    assert [track.identifier for track in result.tracks] == ["a"]
    assert result.tracks[0].thumbnail == "https://img.youtube.com/vi/a/default.jpg"
    assert result.tracks[0].requester == "user-3"


def test_ytdlp_provider_reports_no_matches(monkeypatch) -> None:
    provider = YtDlpSearchProvider()
    monkeypatch.setattr(provider, "_extract", lambda query: [])

    result = asyncio.run(provider.search("song"))

    assert result.load_type is LoadType.NO_MATCHES


def test_ytdlp_provider_reports_extractor_failure(monkeypatch) -> None:
    provider = YtDlpSearchProvider()

    def fail(query):
        raise OSError("network down")

    monkeypatch.setattr(provider, "_extract", fail)

    result = asyncio.run(provider.search("song"))

    assert result.load_type is LoadType.LOAD_FAILED
    assert result.exception.severity is Severity.FAULT
    assert result.exception.message == "network down"
