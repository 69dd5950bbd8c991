#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from collections import Counter

from malapi import AnimeListSort, MALClient, is_error
from malapi.fields import UserAnimeListFields


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk a user's whole anime list page by page")
    p.add_argument("user_name", nargs="?", default="@me")
    p.add_argument("--status", default=None, help="watching, completed, on_hold, ...")
    p.add_argument("--page-size", type=int, default=100)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with MALClient.from_env() as mal:
        fields: UserAnimeListFields = {"list_status": {"status": True, "score": True}}
        first = await mal.get_user_anime_list(
            args.user_name,
            status=args.status,
            sort=AnimeListSort.LIST_UPDATED_AT,
            limit=args.page_size,
            fields=fields,
        )
        statuses: Counter[str] = Counter()
        total = 0
        async for page in mal.iter_pages(first):
            if is_error(page):
                print(f"Stopped: {page.status} {page.error}")
                break
            for entry in page.data:
                total += 1
                if entry.list_status and entry.list_status.status:
                    statuses[entry.list_status.status] += 1
        print(f"{args.user_name}: {total} entries")
        for status, count in statuses.most_common():
            print(f"  {status:15} {count}")


if __name__ == "__main__":
    asyncio.run(main())
