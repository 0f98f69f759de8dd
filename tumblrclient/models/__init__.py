"""Data models for the Tumblr API client.

This package contains Pydantic models for Tumblr entities: the eight
post types sharing a common base, blog information, and the response
wrappers of the blog methods.
"""

from .base import BaseTumblrModel
from .post import (
    PostType,
    PostFilter,
    POST_TYPE_METHODS,
    post_type_method_name,
    BasePost,
    TextPost,
    QuotePost,
    LinkPost,
    AnswerPost,
    VideoPost,
    AudioPost,
    PhotoPost,
    ChatPost,
    Photo,
    PhotoSize,
    DialogueLine,
    VideoPlayer,
)
from .decoding import POST_TYPE_REGISTRY, decode_post, decode_posts
from .blog import BlogInfo, BlogInfoResponse, Posts, Likes


__all__ = [
    # Base model
    "BaseTumblrModel",

    # Enumerations
    "PostType",
    "PostFilter",
    "POST_TYPE_METHODS",
    "post_type_method_name",

    # Posts
    "BasePost",
    "TextPost",
    "QuotePost",
    "LinkPost",
    "AnswerPost",
    "VideoPost",
    "AudioPost",
    "PhotoPost",
    "ChatPost",

    # Supporting models
    "Photo",
    "PhotoSize",
    "DialogueLine",
    "VideoPlayer",

    # Responses
    "BlogInfo",
    "BlogInfoResponse",
    "Posts",
    "Likes",

    # Decoding
    "POST_TYPE_REGISTRY",
    "decode_post",
    "decode_posts",
]
