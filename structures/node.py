"""Built-in node structure: REST access to a Lavalink server."""

from __future__ import annotations

from typing import Any

import requests

from config import settings


class Node:
    """Connection settings and REST requests for one Lavalink node."""

    def __init__(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        password: str | None = None,
        secure: bool | None = None,
        identifier: str | None = None,
        request_timeout: int | None = None,
    ) -> None:
        self.host = host or settings.LAVALINK_HOST
        self.port = port or settings.LAVALINK_PORT
        self.password = password or settings.LAVALINK_PASSWORD
        self.secure = settings.LAVALINK_SECURE if secure is None else secure
        self.identifier = identifier or self.host
        self.request_timeout = request_timeout or settings.LAVALINK_REQUEST_TIMEOUT_SEC

    @property
    def rest_url(self) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.host}:{self.port}"

    def make_request(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.rest_url}/{endpoint.lstrip('/')}"
        response = requests.get(
            url,
            params=params,
            headers={"Authorization": self.password},
            timeout=self.request_timeout,
        )
        if response.status_code != 200:
            raise RuntimeError(f"Lavalink request failed ({response.status_code})")
        return response.json()

    def load_tracks(self, identifier: str) -> dict[str, Any]:
        return self.make_request("/loadtracks", params={"identifier": identifier})

    def __repr__(self) -> str:
        return f"<Node identifier={self.identifier!r} rest_url={self.rest_url!r}>"
