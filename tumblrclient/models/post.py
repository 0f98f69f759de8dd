"""Post models for the Tumblr API.

Every post shares the fields of :class:`BasePost`; the eight concrete
variants add the fields of their content type and are told apart by the
``type`` field of the payload.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field
from typing_extensions import Literal

from ..exceptions import InvalidArgumentError
from ..utils.dates import from_timestamp
from .base import BaseTumblrModel


class PostType(str, Enum):
    """Post types that can be requested from a blog."""

    ALL = "all"
    TEXT = "text"
    QUOTE = "quote"
    LINK = "link"
    ANSWER = "answer"
    VIDEO = "video"
    AUDIO = "audio"
    PHOTO = "photo"
    CHAT = "chat"


class PostFilter(str, Enum):
    """Format of the post body text returned by the API."""

    HTML = "html"
    TEXT = "text"
    RAW = "raw"


POST_TYPE_METHODS: Dict[PostType, str] = {
    PostType.TEXT: "posts/text",
    PostType.QUOTE: "posts/quote",
    PostType.LINK: "posts/link",
    PostType.ANSWER: "posts/answer",
    PostType.VIDEO: "posts/video",
    PostType.AUDIO: "posts/audio",
    PostType.PHOTO: "posts/photo",
    PostType.CHAT: "posts/chat",
}


def post_type_method_name(post_type: Optional[PostType] = None) -> str:
    """Get the blog method path that lists posts of the given type."""
    if post_type is None:
        return "posts"
    try:
        post_type = PostType(post_type)
    except ValueError:
        raise InvalidArgumentError(f"Unknown post type: {post_type!r}", "post_type")
    return POST_TYPE_METHODS.get(post_type, "posts")


class PhotoSize(BaseTumblrModel):
    """One rendition of a photo."""
    width: int
    height: int
    url: str


class Photo(BaseTumblrModel):
    """A photo attached to a photo or link post."""
    caption: str = ""
    original_size: Optional[PhotoSize] = None
    alt_sizes: List[PhotoSize] = []


class DialogueLine(BaseTumblrModel):
    """One line of a chat post."""
    label: str = ""
    name: str = ""
    phrase: str = ""


class VideoPlayer(BaseTumblrModel):
    """Embed code for a video at a given width."""
    width: Any = None
    embed_code: Any = None


class BasePost(BaseTumblrModel):
    """Fields common to every Tumblr post."""

    id: int
    blog_name: str
    type: str
    post_url: Optional[str] = None
    slug: Optional[str] = None
    timestamp: int = 0
    date: Optional[str] = None
    format: Optional[str] = None
    reblog_key: Optional[str] = None
    tags: List[str] = []
    bookmarklet: bool = False
    mobile: bool = False
    source_url: Optional[str] = None
    source_title: Optional[str] = None
    liked: Optional[bool] = None
    state: Optional[str] = None
    note_count: int = 0
    short_url: Optional[str] = None
    summary: Optional[str] = None

    # Present only when reblog_info / notes_info was requested
    reblogged_from_id: Optional[int] = None
    reblogged_from_url: Optional[str] = None
    reblogged_from_name: Optional[str] = None
    reblogged_root_id: Optional[int] = None
    reblogged_root_url: Optional[str] = None
    reblogged_root_name: Optional[str] = None
    notes: List[Dict[str, Any]] = []

    @property
    def posted_at(self) -> datetime:
        """Publication time as an aware UTC datetime."""
        return from_timestamp(self.timestamp)


class TextPost(BasePost):
    type: Literal["text"] = "text"
    title: Optional[str] = None
    body: Optional[str] = None


class QuotePost(BasePost):
    type: Literal["quote"] = "quote"
    text: str = ""
    source: Optional[str] = None


class LinkPost(BasePost):
    type: Literal["link"] = "link"
    title: Optional[str] = None
    url: str = ""
    description: Optional[str] = None
    link_author: Optional[str] = None
    excerpt: Optional[str] = None
    publisher: Optional[str] = None
    photos: List[Photo] = []


class AnswerPost(BasePost):
    type: Literal["answer"] = "answer"
    asking_name: str = ""
    asking_url: Optional[str] = None
    question: str = ""
    answer: str = ""


class VideoPost(BasePost):
    type: Literal["video"] = "video"
    caption: Optional[str] = None
    player: List[VideoPlayer] = []
    video_url: Optional[str] = None
    video_type: Optional[str] = None
    permalink_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class AudioPost(BasePost):
    type: Literal["audio"] = "audio"
    caption: Optional[str] = None
    player: Optional[str] = None
    plays: int = 0
    album_art: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    track_name: Optional[str] = None
    track_number: Optional[int] = None
    year: Optional[int] = None
    audio_url: Optional[str] = None
    audio_type: Optional[str] = None


class PhotoPost(BasePost):
    type: Literal["photo"] = "photo"
    caption: Optional[str] = None
    photos: List[Photo] = []
    width: Optional[int] = None
    height: Optional[int] = None
    image_permalink: Optional[str] = None
    link_url: Optional[str] = None


class ChatPost(BasePost):
    type: Literal["chat"] = "chat"
    title: Optional[str] = None
    body: str = ""
    dialogue: List[DialogueLine] = Field(default_factory=list)
