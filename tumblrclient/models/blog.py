"""Blog-level response models for the Tumblr API."""

from datetime import datetime
from typing import Any, Optional, Tuple

from pydantic import SerializeAsAny, field_validator

from ..utils.dates import from_timestamp
from .base import BaseTumblrModel
from .decoding import decode_posts
from .post import BasePost


class BlogInfo(BaseTumblrModel):
    """General information about a blog."""

    name: str
    title: str = ""
    url: Optional[str] = None
    description: str = ""
    posts: int = 0
    updated: int = 0
    ask: bool = False
    ask_anon: bool = False
    ask_page_title: Optional[str] = None
    likes: Optional[int] = None
    share_likes: Optional[bool] = None
    is_nsfw: bool = False

    @property
    def updated_at(self) -> datetime:
        """Time of the last update as an aware UTC datetime."""
        return from_timestamp(self.updated)


class BlogInfoResponse(BaseTumblrModel):
    """Response wrapper of the ``info`` method."""
    blog: BlogInfo


class Posts(BaseTumblrModel):
    """A page of posts from a blog."""

    blog: Optional[BlogInfo] = None
    posts: Tuple[SerializeAsAny[BasePost], ...] = ()
    total_posts: int = 0

    @field_validator("posts", mode="before")
    @classmethod
    def decode_post_variants(cls, v: Any) -> Tuple[BasePost, ...]:
        """Dispatch each post to its type-specific model."""
        return tuple(decode_posts(v if v is not None else []))


class Likes(BaseTumblrModel):
    """Posts publicly liked by a blog."""

    liked_posts: Tuple[SerializeAsAny[BasePost], ...] = ()
    liked_count: int = 0

    @field_validator("liked_posts", mode="before")
    @classmethod
    def decode_post_variants(cls, v: Any) -> Tuple[BasePost, ...]:
        """Dispatch each post to its type-specific model."""
        return tuple(decode_posts(v if v is not None else []))
