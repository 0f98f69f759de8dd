"""API method descriptors.

A method descriptor holds everything needed to issue one Tumblr API call:
the target URL, the HTTP verb, the access token to sign with (if any) and
the query parameters.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from .parameters import MethodParameterSet, serialize_value
from .utils.auth import Token

API_BASE_URL = "https://api.tumblr.com/v2"


@dataclass(frozen=True)
class ApiMethod:
    """A call to a fixed API endpoint.

    The parameters are copied into a read-only mapping on construction, so
    later changes to the caller's parameter set do not reach the descriptor.
    """

    url: str
    oauth_token: Optional[Token] = None
    http_method: str = "GET"
    parameters: Mapping[str, Any] = field(default_factory=MethodParameterSet, hash=False)

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Method URL cannot be empty.")
        object.__setattr__(self, "http_method", self.http_method.upper())
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def query(self) -> Dict[str, str]:
        """Serialized query parameters."""
        return {key: serialize_value(value) for key, value in self.parameters.items()}


class BlogMethod(ApiMethod):
    """A call scoped to a blog: ``{base_url}/blog/{blog_name}/{method_name}``.

    The blog name is percent-encoded as a single path segment.
    """

    def __init__(
        self,
        blog_name: str,
        method_name: str,
        oauth_token: Optional[Token] = None,
        http_method: str = "GET",
        parameters: Optional[MethodParameterSet] = None,
        base_url: str = API_BASE_URL,
    ) -> None:
        if not blog_name:
            raise ValueError("Blog name cannot be empty.")
        if not method_name:
            raise ValueError("Method name cannot be empty.")

        super().__init__(
            url=f"{base_url.rstrip('/')}/blog/{quote(blog_name, safe='')}/{method_name}",
            oauth_token=oauth_token,
            http_method=http_method,
            parameters=parameters if parameters is not None else MethodParameterSet(),
        )
        object.__setattr__(self, "blog_name", blog_name)
        object.__setattr__(self, "method_name", method_name)

    def __repr__(self) -> str:
        return (
            f"BlogMethod(blog_name={self.blog_name!r}, method_name={self.method_name!r}, "
            f"http_method={self.http_method!r}, parameters={dict(self.parameters)!r})"
        )
