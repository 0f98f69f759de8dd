"""Decoding of polymorphic post payloads.

Post arrays returned by the API mix every post type. Each element is
dispatched on its ``type`` field to the matching post model; a missing or
unknown type is a :class:`~tumblrclient.exceptions.PostDecodeError`.
"""

from typing import Any, Dict, List, Optional, Type

from ..exceptions import PostDecodeError
from .post import (
    AnswerPost,
    AudioPost,
    BasePost,
    ChatPost,
    LinkPost,
    PhotoPost,
    QuotePost,
    TextPost,
    VideoPost,
)

POST_TYPE_REGISTRY: Dict[str, Type[BasePost]] = {
    "text": TextPost,
    "quote": QuotePost,
    "link": LinkPost,
    "answer": AnswerPost,
    "video": VideoPost,
    "audio": AudioPost,
    "photo": PhotoPost,
    "chat": ChatPost,
}


def decode_post(data: Any, index: Optional[int] = None) -> BasePost:
    """Decode a single post payload into its post model.

    Args:
        data: Post object as parsed from JSON
        index: Position of the post in its array, used in error messages

    Returns:
        Instance of the post model registered for the payload's type

    Raises:
        PostDecodeError: If the payload is not an object or its type is missing or unknown
    """
    where = f" at index {index}" if index is not None else ""

    if isinstance(data, BasePost):
        return data

    if not isinstance(data, dict):
        raise PostDecodeError(f"Expected a post object{where}, got {type(data).__name__}", index=index)

    post_type = data.get("type")
    if post_type is None:
        raise PostDecodeError(f"Post{where} has no type", index=index)

    post_class = POST_TYPE_REGISTRY.get(post_type) if isinstance(post_type, str) else None
    if post_class is None:
        raise PostDecodeError(f"Unknown post type {post_type!r}{where}", post_type=str(post_type), index=index)

    return post_class.model_validate(data)


def decode_posts(data: Any) -> List[BasePost]:
    """Decode an array of mixed post payloads, preserving order.

    Raises:
        PostDecodeError: If the payload is not an array or any element fails to dispatch
    """
    if not isinstance(data, (list, tuple)):
        raise PostDecodeError(f"Expected an array of posts, got {type(data).__name__}")

    return [decode_post(item, index) for index, item in enumerate(data)]
