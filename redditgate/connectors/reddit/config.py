"""Shared Reddit connector constants.

This module centralizes URLs, paging limits and the sub-key vocabularies
used by the endpoint specs so the gateway itself stays small and focused.
"""

from __future__ import annotations

# OAuth host serves every endpoint once a bearer token is attached; the
# public host serves the read-only ``.json`` listings without auth
OAUTH_BASE_URL = "https://oauth.reddit.com"
PUBLIC_BASE_URL = "https://www.reddit.com"

DEFAULT_USER_AGENT = "python:redditgate:0.1.0"
DEFAULT_TIMEOUT = 30.0

# Reddit caps the ``limit`` query parameter on listings at 100
MAX_PAGE_SIZE = 100
DEFAULT_LIMIT = 100

# profile.get ``details`` -> path under api/v1/
PROFILE_ENDPOINTS = {
    "identity": "me",
    "blockedUsers": "me/blocked",
    "friends": "me/friends",
    "karma": "me/karma",
    "prefs": "me/prefs",
    "trophies": "me/trophies",
}

# subreddit.get ``content`` values served under r/{sr}/about/{content}.json
SUBREDDIT_CONTENT = frozenset(
    {
        "about",
        "rules",
        "sticky",
        "moderators",
        "contributors",
        "banned",
        "muted",
        "wikibanned",
        "wikicontributors",
        "traffic",
        "edit",
    }
)

# post.getAll ``content`` values (listing sort orders)
POST_LISTING_CONTENT = frozenset({"hot", "new", "rising", "top", "controversial"})

# user.get ``details`` values served under user/{name}/{details}.json
USER_DETAILS = frozenset(
    {
        "about",
        "overview",
        "submitted",
        "comments",
        "upvoted",
        "downvoted",
        "hidden",
        "saved",
        "gilded",
    }
)

# user.get details fetched with a single request instead of the listing fetcher
DIRECT_USER_DETAILS = frozenset({"about", "gilded"})

SELF_POST_KIND = "self"

# Rate limit headers Reddit sends on every OAuth response
RATELIMIT_REMAINING_HEADER = "x-ratelimit-remaining"
RATELIMIT_RESET_HEADER = "x-ratelimit-reset"
