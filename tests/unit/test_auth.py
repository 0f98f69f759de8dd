"""Unit tests for auth.py module.

Tests the Token value type and the OAuthSigner class, including the
signature base string, HMAC-SHA1 signatures and the Authorization header.
"""

import pytest
from unittest.mock import Mock, patch

from tumblrclient.utils.auth import (
    Token,
    OAuthSigner,
    DefaultHmacSha1HashProvider,
    percent_encode,
)
from tumblrclient.exceptions import AuthenticationError


# Reference request from the OAuth 1.0a signing walkthrough published by Twitter
CONSUMER_KEY = "xvz1evFS4wEEPTGEFPHBog"
CONSUMER_SECRET = "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw"
TOKEN = Token("370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb", "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE")
NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"
TIMESTAMP = 1318622958
URL = "https://api.twitter.com/1.1/statuses/update.json"
QUERY = {
    "include_entities": "true",
    "status": "Hello Ladies + Gentlemen, a signed OAuth request!",
}


class TestToken:
    """Test cases for the Token value type."""

    def test_token_fields(self):
        token = Token("key", "secret")
        assert token.key == "key"
        assert token.secret == "secret"

    def test_token_empty_parts(self):
        for key, secret in [("", "secret"), ("key", ""), ("", "")]:
            with pytest.raises(AuthenticationError, match="cannot be empty"):
                Token(key, secret)

    def test_token_repr_hides_secret(self):
        assert repr(Token("key", "secret")) == "Token(key='key', secret='***')"


class TestPercentEncode:
    """Test cases for RFC 3986 percent encoding."""

    def test_unreserved_characters_kept(self):
        assert percent_encode("AZaz09-._~") == "AZaz09-._~"

    def test_reserved_characters_encoded(self):
        assert percent_encode("a b+c/d!") == "a%20b%2Bc%2Fd%21"


class TestOAuthSigner:
    """Test cases for the OAuthSigner class."""

    @pytest.fixture
    def signer(self):
        return OAuthSigner(CONSUMER_KEY, CONSUMER_SECRET)

    def test_signer_requires_consumer_credentials(self):
        with pytest.raises(AuthenticationError, match="cannot be empty"):
            OAuthSigner("", "secret")
        with pytest.raises(AuthenticationError, match="cannot be empty"):
            OAuthSigner("key", "")

    def test_default_hash_provider(self, signer):
        assert isinstance(signer.hash_provider, DefaultHmacSha1HashProvider)

    def test_oauth_parameters_without_token(self, signer):
        params = signer.oauth_parameters(nonce="abc", timestamp=1000)

        assert params == {
            "oauth_consumer_key": CONSUMER_KEY,
            "oauth_nonce": "abc",
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": "1000",
            "oauth_version": "1.0",
        }

    def test_oauth_parameters_with_token(self, signer):
        params = signer.oauth_parameters(TOKEN, nonce="abc", timestamp=1000)
        assert params["oauth_token"] == TOKEN.key

    def test_oauth_parameters_uses_current_time(self, signer):
        with patch("time.time", return_value=2000):
            params = signer.oauth_parameters()

        assert params["oauth_timestamp"] == "2000"
        assert params["oauth_nonce"]

    def test_signature_base_string(self, signer):
        params = dict(QUERY)
        params.update(signer.oauth_parameters(TOKEN, nonce=NONCE, timestamp=TIMESTAMP))

        base_string = signer.signature_base_string("post", URL, params)

        assert base_string.startswith(
            "POST&https%3A%2F%2Fapi.twitter.com%2F1.1%2Fstatuses%2Fupdate.json&"
            "include_entities%3Dtrue%26oauth_consumer_key%3Dxvz1evFS4wEEPTGEFPHBog"
        )
        assert base_string.endswith(
            "status%3DHello%2520Ladies%2520%252B%2520Gentlemen%252C%2520a%2520signed%2520OAuth%2520request%2521"
        )

    def test_reference_signature(self, signer):
        params = dict(QUERY)
        params.update(signer.oauth_parameters(TOKEN, nonce=NONCE, timestamp=TIMESTAMP))

        assert signer.sign("POST", URL, params, TOKEN) == "hCtSmYh+iHYCEqBWrE7C7hYmtUk="

    def test_authorization_header(self, signer):
        header = signer.authorization_header("POST", URL, QUERY, TOKEN, nonce=NONCE, timestamp=TIMESTAMP)

        assert header.startswith("OAuth ")
        assert 'oauth_consumer_key="xvz1evFS4wEEPTGEFPHBog"' in header
        assert f'oauth_token="{TOKEN.key}"' in header
        assert 'oauth_signature="hCtSmYh%2BiHYCEqBWrE7C7hYmtUk%3D"' in header
        # Query parameters are signed but not sent in the header
        assert "include_entities" not in header

    def test_authorization_header_without_token(self, signer):
        header = signer.authorization_header("GET", URL, nonce=NONCE, timestamp=TIMESTAMP)
        assert "oauth_token" not in header

    def test_custom_hash_provider(self):
        provider = Mock()
        provider.compute_hash.return_value = b"abc"
        signer = OAuthSigner("key", "secret", hash_provider=provider)

        signature = signer.sign("GET", "https://api.tumblr.com/v2/tagged", {"tag": "cats"})

        assert signature == "YWJj"
        key, data = provider.compute_hash.call_args[0]
        assert key == b"secret&"
        assert data.startswith(b"GET&https%3A%2F%2Fapi.tumblr.com%2Fv2%2Ftagged&")

    def test_hash_provider_failure(self):
        provider = Mock()
        provider.compute_hash.side_effect = RuntimeError("boom")
        signer = OAuthSigner("key", "secret", hash_provider=provider)

        with pytest.raises(AuthenticationError, match="Failed to compute OAuth signature"):
            signer.sign("GET", "https://api.tumblr.com/v2/tagged", {})

    def test_default_port_removed_from_url(self, signer):
        base_string = signer.signature_base_string("GET", "HTTPS://API.Tumblr.com:443/v2/tagged", {})
        assert base_string == "GET&https%3A%2F%2Fapi.tumblr.com%2Fv2%2Ftagged&"
