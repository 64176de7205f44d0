#!/usr/bin/env python3
from __future__ import annotations

import asyncio
import logging
import sys

import tracks
from search.lavalink import LavalinkSearchProvider
from structures import registry


def main() -> int:
    query = " ".join(sys.argv[1:]).strip()
    if not query:
        print("Usage: scripts/resolve_smoke.py <query>")
        return 1
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    node = registry.get(registry.Role.NODE)()
    tracks.init(LavalinkSearchProvider(node))
    unresolved = tracks.build_unresolved(query)
    try:
        asyncio.run(unresolved.resolve())
    except tracks.NoMatchError as exc:
        print(f"query={query!r} no match: {exc} severity={exc.severity.value}")
        return 2

    print(f"query={query!r} node={node.rest_url}")
    print(
        f"{unresolved.title} | {unresolved.author} | "
        f"{tracks.format_time(unresolved.duration, minimal=True)} | {unresolved.uri}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
