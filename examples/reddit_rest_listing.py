#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from redditgate import RedditGateway


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch a subreddit post listing via REST")
    p.add_argument("subreddit", nargs="?", default="python")
    p.add_argument("content", nargs="?", default="hot", choices=["hot", "new", "rising", "top", "controversial"])
    p.add_argument("limit", nargs="?", type=int, default=10)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with RedditGateway.from_env() as gateway:
        posts = await gateway.process(
            [
                {
                    "resource": "post",
                    "operation": "getAll",
                    "subreddit": args.subreddit,
                    "content": args.content,
                    "limit": args.limit,
                }
            ]
        )

    print("=" * 80)
    print(f"Subreddit : r/{args.subreddit} ({args.content})")
    print(f"Posts     : {len(posts)}")
    print("=" * 80)
    print(f"{'Score':>7} | {'Comments':>8} | Title")
    print("-" * 80)
    for post in posts:
        title = post.get("title", "")[:58]
        print(f"{post.get('score', 0):>7} | {post.get('num_comments', 0):>8} | {title}")
    print("=" * 80)


if __name__ == "__main__":
    asyncio.run(main())
