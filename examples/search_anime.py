#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from malapi import MALClient, is_error


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search anime by title")
    p.add_argument("query")
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("--pages", type=int, default=1, help="Number of pages to walk")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with MALClient.from_env() as mal:
        page = await mal.get_anime_list(
            args.query,
            limit=args.limit,
            fields={"mean": True, "num_episodes": True, "start_season": True},
        )
        pages_seen = 0
        async for current in mal.iter_pages(page):
            if is_error(current):
                print(f"Request failed: {current.status} {current.error} {current.message or ''}")
                return
            for anime in current.data:
                season = (
                    f"{anime.start_season.season} {anime.start_season.year}"
                    if anime.start_season
                    else "?"
                )
                mean = f"{anime.mean:.2f}" if anime.mean is not None else "-"
                print(f"{anime.id:>7} | {mean:>5} | {season:>12} | {anime.title}")
            pages_seen += 1
            if pages_seen >= args.pages:
                break


if __name__ == "__main__":
    asyncio.run(main())
