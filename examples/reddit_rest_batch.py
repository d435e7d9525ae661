#!/usr/bin/env python3
"""Run a mixed batch of work items and print the flattened records.

Requires REDDIT_ACCESS_TOKEN for the profile item; the other items also work
against the public host.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging

from redditgate import GatewayError, RedditGateway


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Process a batch of Reddit work items")
    p.add_argument("username", nargs="?", default="spez")
    p.add_argument("subreddit", nargs="?", default="python")
    p.add_argument("--concurrency", type=int, default=1)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    items = [
        {"resource": "subreddit", "operation": "get", "subreddit": args.subreddit, "content": "rules"},
        {"resource": "user", "operation": "get", "username": args.username, "details": "about"},
        {"resource": "user", "operation": "get", "username": args.username, "details": "comments", "limit": 5},
    ]

    async with RedditGateway.from_env(max_concurrency=args.concurrency) as gateway:
        try:
            records = await gateway.process(items)
        except GatewayError as exc:
            print(f"Batch failed: {exc}")
            return

    for record in records:
        print(json.dumps(record, default=str)[:160])
    print(f"\n{len(records)} records from {len(items)} items")


if __name__ == "__main__":
    asyncio.run(main())
