"""MongoDB collection names used by the social-api service."""

from __future__ import annotations

USERS_COLLECTION = "users"
PROFILES_COLLECTION = "profiles"
POSTS_COLLECTION = "posts"
MEMBER_TYPES_COLLECTION = "member_types"
USER_DELETIONS_COLLECTION = "user_deletions"

__all__ = [
    "USERS_COLLECTION",
    "PROFILES_COLLECTION",
    "POSTS_COLLECTION",
    "MEMBER_TYPES_COLLECTION",
    "USER_DELETIONS_COLLECTION",
]
