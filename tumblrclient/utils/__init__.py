"""Utility modules for the Tumblr API client.

This package contains OAuth request signing and timestamp conversions.
"""

from .auth import Token, HmacSha1HashProvider, DefaultHmacSha1HashProvider, OAuthSigner
from .dates import to_timestamp, from_timestamp

__all__ = [
    "Token",
    "HmacSha1HashProvider",
    "DefaultHmacSha1HashProvider",
    "OAuthSigner",
    "to_timestamp",
    "from_timestamp",
]
