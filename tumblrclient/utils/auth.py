"""OAuth 1.0a request signing for the Tumblr API.

This module provides the access token value type, the HMAC-SHA1 hash
provider abstraction, and an OAuth signer that builds the ``Authorization``
header for a request.
"""

import base64
import hashlib
import hmac
import secrets
import time
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Protocol
from urllib.parse import quote, urlsplit, urlunsplit

from ..exceptions import AuthenticationError


@dataclass(frozen=True)
class Token:
    """OAuth access token (key and secret) for a Tumblr account."""

    key: str
    secret: str

    def __post_init__(self) -> None:
        if not self.key or not self.secret:
            raise AuthenticationError("Token key and secret cannot be empty")

    def __repr__(self) -> str:
        return f"Token(key={self.key!r}, secret='***')"


class HmacSha1HashProvider(Protocol):
    """Computes HMAC-SHA1 digests for OAuth signatures."""

    def compute_hash(self, key: bytes, data: bytes) -> bytes:
        ...


class DefaultHmacSha1HashProvider:
    """HMAC-SHA1 hash provider backed by :mod:`hmac`."""

    def compute_hash(self, key: bytes, data: bytes) -> bytes:
        return hmac.new(key, data, hashlib.sha1).digest()


def percent_encode(value: str) -> str:
    """Percent-encode a value per RFC 3986 as OAuth requires."""
    return quote(value, safe="~")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    netloc = parts.netloc.lower()
    if (scheme, netloc.rsplit(":", 1)[-1]) in (("http", "80"), ("https", "443")):
        netloc = netloc.rsplit(":", 1)[0]
    return urlunsplit((scheme, netloc, parts.path or "/", "", ""))


class OAuthSigner:
    """OAuth 1.0a HMAC-SHA1 signer."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        hash_provider: Optional[HmacSha1HashProvider] = None,
    ) -> None:
        """Initialize the signer.

        Args:
            consumer_key: Application consumer key
            consumer_secret: Application consumer secret
            hash_provider: HMAC-SHA1 implementation; the stdlib one if omitted

        Raises:
            AuthenticationError: If the consumer credentials are empty
        """
        if not consumer_key or not consumer_secret:
            raise AuthenticationError("Consumer key and consumer secret cannot be empty")

        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.hash_provider = hash_provider or DefaultHmacSha1HashProvider()

    def oauth_parameters(
        self,
        token: Optional[Token] = None,
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> Dict[str, str]:
        """Build the protocol parameters for one request."""
        params = {
            "oauth_consumer_key": self.consumer_key,
            "oauth_nonce": nonce or secrets.token_hex(16),
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": str(timestamp if timestamp is not None else int(time.time())),
            "oauth_version": "1.0",
        }
        if token is not None:
            params["oauth_token"] = token.key
        return params

    def signature_base_string(
        self,
        method: str,
        url: str,
        params: Mapping[str, str],
    ) -> str:
        """Build the signature base string from the method, URL and all parameters."""
        pairs = sorted((percent_encode(k), percent_encode(v)) for k, v in params.items())
        normalized = "&".join(f"{k}={v}" for k, v in pairs)
        return "&".join(
            [method.upper(), percent_encode(_normalize_url(url)), percent_encode(normalized)]
        )

    def sign(
        self,
        method: str,
        url: str,
        params: Mapping[str, str],
        token: Optional[Token] = None,
    ) -> str:
        """Compute the base64 HMAC-SHA1 signature for a request."""
        key = f"{percent_encode(self.consumer_secret)}&{percent_encode(token.secret) if token else ''}"
        base_string = self.signature_base_string(method, url, params)
        try:
            digest = self.hash_provider.compute_hash(key.encode("ascii"), base_string.encode("ascii"))
        except Exception as e:
            raise AuthenticationError(f"Failed to compute OAuth signature: {e}")
        return base64.b64encode(digest).decode("ascii")

    def authorization_header(
        self,
        method: str,
        url: str,
        query: Optional[Mapping[str, str]] = None,
        token: Optional[Token] = None,
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> str:
        """Build the ``Authorization`` header value for a request.

        Args:
            method: HTTP method
            url: Request URL without query string
            query: Query (or form) parameters sent with the request
            token: Access token, if the request is made on behalf of an account
            nonce: Fixed nonce, random if omitted
            timestamp: Fixed timestamp, current time if omitted

        Returns:
            Header value starting with ``OAuth``
        """
        oauth_params = self.oauth_parameters(token, nonce=nonce, timestamp=timestamp)
        all_params = dict(query or {})
        all_params.update(oauth_params)
        oauth_params["oauth_signature"] = self.sign(method, url, all_params, token)

        return "OAuth " + ", ".join(
            f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(oauth_params.items())
        )
