"""
Shared HTTP plumbing for the editor's remote collaborators.

Each client talks to one JSON service. Connection failures, timeouts and
any other transport error are raised as the client's ``unavailable_error``.
Unexpected status codes and bodies that are not the expected JSON shape
are raised as its ``api_error`` carrying the status code.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonApiClient:
    """
    Base class for async JSON API clients.

    Subclasses set ``service_name`` and the two error types.
    """

    service_name = "API"
    unavailable_error: Type[Exception] = ConnectionError
    api_error: Type[Exception] = RuntimeError

    def __init__(
        self,
        base_url: str,
        api_token: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the service (e.g., "http://program-api:8005")
            api_token: Bearer token sent with every request, if any
            timeout: Request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._api_token = api_token
        self._timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        expected: Tuple[int, ...] = (200,),
        allow: Tuple[int, ...] = (),
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Send a request and check its status.

        Args:
            method: Lower-case HTTP verb ("get", "post", ...)
            path: Path relative to the base URL
            expected: Success status codes
            allow: Extra status codes returned to the caller unchecked (e.g. 404)

        Raises:
            unavailable_error: If the service is not reachable or times out
            api_error: If the response status is neither expected nor allowed
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await getattr(client, method)(url, headers=self._headers(), **kwargs)

                if response.status_code in expected or response.status_code in allow:
                    return response

                logger.error(
                    f"{self.service_name} error: {response.status_code} - {response.text}"
                )
                raise self.api_error(
                    f"{self.service_name} {method.upper()} {path} failed: {response.text}",
                    response.status_code,
                )

        except httpx.ConnectError as e:
            logger.error(f"{self.service_name} unavailable: {e}")
            raise self.unavailable_error(
                f"{self.service_name} is not available at {self._base_url}"
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"{self.service_name} timeout: {e}")
            raise self.unavailable_error(f"{self.service_name} request timed out") from e
        except httpx.RequestError as e:
            logger.error(f"{self.service_name} transport error: {e}")
            raise self.unavailable_error(
                f"{self.service_name} request failed: {type(e).__name__}"
            ) from e

    def _parse(self, response: httpx.Response, parse: Callable[[Any], T]) -> T:
        """
        Decode a JSON body and build the result with ``parse``.

        Raises:
            api_error: If the body is not JSON or does not have the expected shape
        """
        try:
            return parse(response.json())
        except (ValueError, TypeError, ValidationError) as e:
            logger.error(f"{self.service_name} returned an unreadable body: {e}")
            raise self.api_error(
                f"{self.service_name} returned an invalid response body",
                response.status_code,
            ) from e
