"""Tumblr API client.

This module provides the high-level client for the Tumblr v2 API blog and
tagged-post methods. Every accessor validates its arguments and builds the
method descriptor synchronously, then returns an awaitable that performs
the single HTTP round trip.
"""

import logging
import threading
from datetime import datetime
from typing import Any, Awaitable, List, Optional, Union

import httpx

from .config import Profile
from .exceptions import ArgumentOutOfRangeError, ClientDisposedError, InvalidArgumentError
from .invoker import ApiInvoker
from .methods import API_BASE_URL, ApiMethod, BlogMethod
from .models import (
    BasePost,
    BlogInfo,
    BlogInfoResponse,
    Likes,
    PostFilter,
    PostType,
    Posts,
    decode_posts,
    post_type_method_name,
)
from .parameters import MethodParameterSet
from .utils.auth import HmacSha1HashProvider, OAuthSigner, Token

logger = logging.getLogger(__name__)

MAX_COUNT = 20


def _require_string(name: str, value: Any, empty_message: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} is required.", name)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string.", name)
    if len(value) == 0:
        raise InvalidArgumentError(empty_message, name)


def _require_start_index(value: int) -> None:
    if value < 0:
        raise ArgumentOutOfRangeError(
            "start_index must be greater or equal to zero.", "start_index", value
        )


def _require_count(value: int) -> None:
    if value < 1 or value > MAX_COUNT:
        raise ArgumentOutOfRangeError(
            f"count must be between 1 and {MAX_COUNT}.", "count", value
        )


def _filter_value(value: Union[PostFilter, str]) -> str:
    try:
        return PostFilter(str(value.value if isinstance(value, PostFilter) else value).lower()).value
    except ValueError:
        raise InvalidArgumentError(f"Unknown post filter: {value!r}", "filter")


def _first_post(posts: Posts) -> Optional[BasePost]:
    return posts.posts[0] if posts.posts else None


class TumblrClient:
    """Asynchronous client for the Tumblr v2 API.

    Example::

        async with TumblrClient(consumer_key, consumer_secret) as client:
            info = await client.get_blog_info("staff.tumblr.com")
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        oauth_token: Optional[Token] = None,
        hash_provider: Optional[HmacSha1HashProvider] = None,
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
        send_api_key: bool = False,
        debug: bool = False,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize Tumblr API client.

        Args:
            consumer_key: OAuth consumer key of the application
            consumer_secret: OAuth consumer secret of the application
            oauth_token: Access token; without it only methods that do not
                require OAuth can be invoked successfully
            hash_provider: HMAC-SHA1 implementation used to sign requests
            base_url: Tumblr API base URL
            timeout: Default request timeout in seconds
            send_api_key: Whether to send the consumer key as ``api_key``
            debug: Whether to log request and response details
            http_client: Shared async HTTP client; one is created (and owned) if omitted

        Raises:
            AuthenticationError: If the consumer credentials are empty
        """
        self.signer = OAuthSigner(consumer_key, consumer_secret, hash_provider)
        self.consumer_key = consumer_key
        self.oauth_token = oauth_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.send_api_key = send_api_key
        self.debug = debug

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)
        self._invoker = ApiInvoker(self.http_client, self.signer, timeout=timeout, debug=debug)

        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def from_profile(cls, profile: Profile, **kwargs: Any) -> "TumblrClient":
        """Create a client from a configuration profile.

        Args:
            profile: Configuration profile
            **kwargs: Additional client arguments (e.g. ``debug``, ``http_client``)

        Returns:
            Configured client
        """
        return cls(
            consumer_key=profile.consumer_key,
            consumer_secret=profile.consumer_secret,
            oauth_token=profile.token,
            base_url=profile.base_url,
            timeout=profile.timeout,
            send_api_key=profile.send_api_key,
            **kwargs,
        )

    # Lifecycle
    @property
    def closed(self) -> bool:
        """Whether the client has been closed."""
        with self._lock:
            return self._closed

    def _ensure_open(self) -> None:
        with self._lock:
            if self._closed:
                raise ClientDisposedError("TumblrClient")

    async def aclose(self) -> None:
        """Close the client. Closing an already closed client does nothing."""
        with self._lock:
            if self._closed:
                return
            self._closed = True

        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "TumblrClient":
        self._ensure_open()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _new_parameters(self) -> MethodParameterSet:
        parameters = MethodParameterSet()
        if self.send_api_key:
            parameters.add("api_key", self.consumer_key)
        return parameters

    # Blog methods
    def get_blog_info(self, blog_name: str, timeout: Optional[float] = None) -> Awaitable[BlogInfo]:
        """Retrieve general information about a blog, such as its title and number of posts.

        Args:
            blog_name: Name of the blog
            timeout: Request timeout in seconds

        Returns:
            Awaitable resolving to the blog's :class:`BlogInfo`

        Raises:
            ClientDisposedError: If the client has been closed
            InvalidArgumentError: If blog_name is None or empty
        """
        self._ensure_open()
        _require_string("blog_name", blog_name, "Blog name cannot be empty.")

        parameters = self._new_parameters()

        return self._invoker.call(
            BlogMethod(blog_name, "info", self.oauth_token, "GET", parameters, base_url=self.base_url),
            BlogInfoResponse,
            projection=lambda r: r.blog,
            timeout=timeout,
        )

    def get_posts(
        self,
        blog_name: str,
        start_index: int = 0,
        count: int = 20,
        post_type: PostType = PostType.ALL,
        include_reblog_info: bool = False,
        include_notes_info: bool = False,
        filter: Union[PostFilter, str] = PostFilter.HTML,
        tag: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Awaitable[Posts]:
        """Retrieve published posts from a blog.

        Args:
            blog_name: Name of the blog
            start_index: Offset to start from; 0 is the latest post
            count: Number of posts to retrieve, between 1 and 20
            post_type: Type of posts to retrieve
            include_reblog_info: Whether to include reblog info with the posts
            include_notes_info: Whether to include notes info with the posts
            filter: Format of the post bodies
            tag: Only return posts with this tag
            timeout: Request timeout in seconds

        Returns:
            Awaitable resolving to a :class:`Posts` page

        Raises:
            ClientDisposedError: If the client has been closed
            InvalidArgumentError: If blog_name is None or empty
            ArgumentOutOfRangeError: If start_index is negative or count is outside 1..20
        """
        self._ensure_open()
        _require_string("blog_name", blog_name, "Blog name cannot be empty.")
        _require_start_index(start_index)
        _require_count(count)

        method_name = post_type_method_name(post_type)

        parameters = self._new_parameters()
        parameters.add("offset", start_index, 0)
        parameters.add("limit", count, MAX_COUNT)
        parameters.add("reblog_info", include_reblog_info, False)
        parameters.add("notes_info", include_notes_info, False)
        parameters.add("filter", _filter_value(filter), PostFilter.HTML.value)
        parameters.add("tag", tag)

        return self._invoker.call(
            BlogMethod(blog_name, method_name, None, "GET", parameters, base_url=self.base_url),
            Posts,
            timeout=timeout,
        )

    def get_post(
        self,
        blog_name: str,
        post_id: int,
        include_reblog_info: bool = False,
        include_notes_info: bool = False,
        timeout: Optional[float] = None,
    ) -> Awaitable[Optional[BasePost]]:
        """Retrieve a specific post by id.

        Args:
            blog_name: Name of the blog
            post_id: Id of the post
            include_reblog_info: Whether to include reblog info with the post
            include_notes_info: Whether to include notes info with the post
            timeout: Request timeout in seconds

        Returns:
            Awaitable resolving to the post, or None if no post has that id

        Raises:
            ClientDisposedError: If the client has been closed
            InvalidArgumentError: If blog_name is None or empty
            ArgumentOutOfRangeError: If post_id is negative
        """
        self._ensure_open()
        _require_string("blog_name", blog_name, "Blog name cannot be empty.")
        if post_id < 0:
            raise ArgumentOutOfRangeError("post_id must be greater or equal to zero.", "post_id", post_id)

        parameters = self._new_parameters()
        parameters.add("id", post_id, 0)
        parameters.add("reblog_info", include_reblog_info, False)
        parameters.add("notes_info", include_notes_info, False)

        return self._invoker.call(
            BlogMethod(blog_name, "posts", None, "GET", parameters, base_url=self.base_url),
            Posts,
            projection=_first_post,
            timeout=timeout,
        )

    def get_blog_likes(
        self,
        blog_name: str,
        start_index: int = 0,
        count: int = 20,
        timeout: Optional[float] = None,
    ) -> Awaitable[Likes]:
        """Retrieve the publicly exposed likes of a blog.

        Args:
            blog_name: Name of the blog
            start_index: Offset to start from; 0 is the latest like
            count: Number of likes to retrieve, between 1 and 20
            timeout: Request timeout in seconds

        Returns:
            Awaitable resolving to the blog's :class:`Likes`

        Raises:
            ClientDisposedError: If the client has been closed
            InvalidArgumentError: If blog_name is None or empty
            ArgumentOutOfRangeError: If start_index is negative or count is outside 1..20
        """
        self._ensure_open()
        _require_string("blog_name", blog_name, "Blog name cannot be empty.")
        _require_start_index(start_index)
        _require_count(count)

        parameters = self._new_parameters()
        parameters.add("offset", start_index, 0)
        parameters.add("limit", count, MAX_COUNT)

        return self._invoker.call(
            BlogMethod(blog_name, "likes", None, "GET", parameters, base_url=self.base_url),
            Likes,
            timeout=timeout,
        )

    # Tagged methods
    def get_tagged_posts(
        self,
        tag: str,
        before: Optional[datetime] = None,
        count: int = 20,
        filter: Union[PostFilter, str] = PostFilter.HTML,
        timeout: Optional[float] = None,
    ) -> Awaitable[List[BasePost]]:
        """Retrieve posts tagged with a specific tag.

        The API documents this method as requiring an OAuth token. Without
        one the call is still sent and the API decides whether to reject it.

        Args:
            tag: Tag of the posts to retrieve
            before: Only return posts published before this time
            count: Number of posts to retrieve, between 1 and 20
            filter: Format of the post bodies
            timeout: Request timeout in seconds

        Returns:
            Awaitable resolving to the posts, in API order

        Raises:
            ClientDisposedError: If the client has been closed
            InvalidArgumentError: If tag is None or empty
            ArgumentOutOfRangeError: If count is outside 1..20
        """
        self._ensure_open()
        _require_string("tag", tag, "Tag cannot be empty.")
        _require_count(count)

        if self.oauth_token is None:
            logger.debug("Requesting tagged posts without an OAuth token")

        parameters = self._new_parameters()
        parameters.add("tag", tag)
        parameters.add("before", before)
        parameters.add("limit", count, MAX_COUNT)
        parameters.add("filter", _filter_value(filter), PostFilter.HTML.value)

        return self._invoker.call(
            ApiMethod(f"{self.base_url}/tagged", self.oauth_token, "GET", parameters),
            decoder=decode_posts,
            timeout=timeout,
        )
