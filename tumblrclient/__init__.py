"""Tumblr API client package.

A typed, asynchronous client for the Tumblr v2 API. Provides blog
information, post listing, single post lookup, blog likes and tagged
post search, decoding every post into its type-specific model.
"""

__version__ = "0.1.0"
__description__ = "Typed asynchronous client for the Tumblr v2 API"

# Re-export main classes for convenience
from .client import TumblrClient
from .config import ConfigManager, Profile
from .invoker import ApiInvoker
from .methods import ApiMethod, BlogMethod
from .parameters import MethodParameterSet
from .models import (
    PostType,
    PostFilter,
    BasePost,
    TextPost,
    QuotePost,
    LinkPost,
    AnswerPost,
    VideoPost,
    AudioPost,
    PhotoPost,
    ChatPost,
    BlogInfo,
    Posts,
    Likes,
)
from .utils.auth import Token, HmacSha1HashProvider, DefaultHmacSha1HashProvider, OAuthSigner
from .exceptions import (
    TumblrClientError,
    ConfigError,
    AuthenticationError,
    ClientDisposedError,
    InvalidArgumentError,
    ArgumentOutOfRangeError,
    PostDecodeError,
    APIError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    NetworkError,
    ResponseDecodeError,
    RateLimitError,
)

__all__ = [
    "__version__",
    "__description__",
    "TumblrClient",
    "ConfigManager",
    "Profile",
    "ApiInvoker",
    "ApiMethod",
    "BlogMethod",
    "MethodParameterSet",
    "PostType",
    "PostFilter",
    "BasePost",
    "TextPost",
    "QuotePost",
    "LinkPost",
    "AnswerPost",
    "VideoPost",
    "AudioPost",
    "PhotoPost",
    "ChatPost",
    "BlogInfo",
    "Posts",
    "Likes",
    "Token",
    "HmacSha1HashProvider",
    "DefaultHmacSha1HashProvider",
    "OAuthSigner",
    "TumblrClientError",
    "ConfigError",
    "AuthenticationError",
    "ClientDisposedError",
    "InvalidArgumentError",
    "ArgumentOutOfRangeError",
    "PostDecodeError",
    "APIError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ServerError",
    "NetworkError",
    "ResponseDecodeError",
    "RateLimitError",
]
