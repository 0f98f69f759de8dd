"""Generic invocation of Tumblr API methods.

The invoker signs a method descriptor, performs exactly one HTTP request,
unwraps the Tumblr response envelope, decodes the payload and applies the
caller's projection. Failures are raised as :class:`APIError` subclasses.
"""

import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .methods import ApiMethod
from .utils.auth import OAuthSigner
from .exceptions import (
    APIError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    NetworkError,
    ResponseDecodeError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _error_message(default: str, error_data: Any) -> str:
    """Fold the messages of a Tumblr error envelope into one string."""
    if not isinstance(error_data, dict):
        return default

    messages = []
    meta = error_data.get("meta")
    if isinstance(meta, dict) and meta.get("msg"):
        messages.append(str(meta["msg"]))

    for err in error_data.get("errors") or []:
        if isinstance(err, dict):
            detail = err.get("detail") or err.get("title")
            if detail:
                messages.append(str(detail))

    if not messages:
        return default
    return f"{default}: {'; '.join(messages)}"


class ApiInvoker:
    """Issues API method calls over a shared HTTP client."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        signer: Optional[OAuthSigner] = None,
        timeout: float = 30.0,
        debug: bool = False,
    ) -> None:
        """Initialize the invoker.

        Args:
            http_client: Async HTTP client used for every call
            signer: OAuth signer; requests are sent unsigned if omitted
            timeout: Default request timeout in seconds
            debug: Whether to log request and response details
        """
        self.http_client = http_client
        self.signer = signer
        self.timeout = timeout
        self.debug = debug

    def _build_headers(self, method: ApiMethod, query: Dict[str, str]) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.signer is not None:
            headers["Authorization"] = self.signer.authorization_header(
                method.http_method, method.url, query, method.oauth_token
            )
        return headers

    def _handle_response(self, response: httpx.Response) -> Any:
        """Check the status of a response and unwrap its envelope.

        Args:
            response: Response object

        Returns:
            The ``response`` member of the Tumblr envelope

        Raises:
            APIError: For error statuses and malformed bodies
        """
        status = response.status_code
        error_data: Any = {}
        try:
            error_data = response.json()
        except ValueError:
            if response.is_success:
                raise ResponseDecodeError(
                    "Response body is not valid JSON",
                    status_code=status,
                    response_data={"body": response.text[:500]},
                )

        if status == 400:
            raise BadRequestError(
                _error_message("Bad request", error_data),
                status_code=status,
                response_data=error_data,
            )
        elif status == 401:
            raise UnauthorizedError(
                _error_message("Unauthorized - check your OAuth credentials", error_data),
                status_code=status,
                response_data=error_data,
            )
        elif status == 403:
            raise ForbiddenError(
                _error_message("Forbidden", error_data),
                status_code=status,
                response_data=error_data,
            )
        elif status == 404:
            raise NotFoundError(
                _error_message("Resource not found", error_data),
                status_code=status,
                response_data=error_data,
            )
        elif status == 429:
            retry_after = response.headers.get("Retry-After")
            message = "Rate limit exceeded"
            if retry_after:
                message += f", retry after: {retry_after} seconds"

            raise RateLimitError(
                _error_message(message, error_data),
                status_code=status,
                response_data=error_data,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        elif status >= 500:
            raise ServerError(
                _error_message(f"Server error: {status}", error_data),
                status_code=status,
                response_data=error_data,
            )
        elif not response.is_success:
            raise APIError(
                _error_message(f"Unexpected status: {status}", error_data),
                status_code=status,
                response_data=error_data,
            )

        if not isinstance(error_data, dict) or "response" not in error_data:
            raise ResponseDecodeError(
                "Response body has no 'response' member",
                status_code=status,
                response_data=error_data,
            )

        return error_data["response"]

    async def call(
        self,
        method: ApiMethod,
        response_type: Optional[Type[BaseModel]] = None,
        projection: Optional[Callable[[Any], T]] = None,
        decoder: Optional[Callable[[Any], Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Invoke an API method.

        Args:
            method: Method descriptor to invoke
            response_type: Model the response payload is validated against
            projection: Maps the decoded payload to the returned value
            decoder: Custom decoder used instead of ``response_type``
            timeout: Request timeout in seconds, overriding the default

        Returns:
            The projected result

        Raises:
            APIError: On network failure, error status, or undecodable payload
            PostDecodeError: If a post in the payload has an unknown type
        """
        query = method.query
        headers = self._build_headers(method, query)

        if self.debug:
            logger.debug("Making %s request to %s", method.http_method, method.url)
            if query:
                logger.debug("Params: %s", query)

        try:
            response = await self.http_client.request(
                method.http_method,
                method.url,
                params=query,
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timeout: {e}")
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}")
        except RuntimeError as e:
            if not self.http_client.is_closed:
                raise
            raise NetworkError(f"Request failed: {e}")

        if self.debug:
            logger.debug("Response status: %s", response.status_code)

        payload = self._handle_response(response)

        try:
            if decoder is not None:
                result = decoder(payload)
            elif response_type is not None:
                result = response_type.model_validate(payload)
            else:
                result = payload
        except ValidationError as e:
            raise ResponseDecodeError(
                f"Failed to decode response: {e.error_count()} validation error(s)",
                status_code=response.status_code,
                response_data=payload,
            )

        return projection(result) if projection is not None else result
