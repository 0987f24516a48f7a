"""HTTP client for Google Maps Platform web service requests."""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp
from yarl import URL

from nearby_places.adapters.api_request_logger import log_api_request, log_api_response
from nearby_places.adapters.google_maps.constants import DEFAULT_HEADERS
from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models.error_details import ErrorKind

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class GoogleMapsHttpClient:
    """HTTP client for the Google Maps JSON web services.

    Every request carries the API key and is bounded by the configured timeout.
    Failures raise UpstreamError instead of returning partial data.
    """

    def __init__(
        self,
        session: "ClientSession",
        api_key: str,
        timeout_seconds: float = 10.0,
        language: str | None = None,
    ) -> None:
        """Initialize with an aiohttp session and credentials.

        Args:
            session: Shared aiohttp ClientSession.
            api_key: Google Maps Platform API key.
            timeout_seconds: Total timeout per request.
            language: Optional result language sent with every request.
        """
        if not api_key:
            logger.warning("No Google Maps API key configured, requests will be rejected")
        self._session = session
        self._api_key = api_key
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._language = language

    async def get_json(self, url: str, params: dict[str, str | int]) -> dict[str, Any]:
        """GET a JSON object, letting aiohttp encode the query parameters.

        Args:
            url: Endpoint URL without query string.
            params: Query parameters, without the API key.

        Returns:
            The decoded top-level JSON object.

        Raises:
            UpstreamError: On network failure, timeout, non-200 status or malformed JSON.
        """
        full_params: dict[str, str | int] = dict(params)
        if self._language:
            full_params["language"] = self._language
        log_api_request("GET", url, full_params)
        full_params["key"] = self._api_key
        return await self._fetch(url, url, full_params)

    async def get_json_encoded(self, url: str, encoded_query: str) -> dict[str, Any]:
        """GET a JSON object using a query string the caller already percent-encoded.

        Args:
            url: Endpoint URL without query string.
            encoded_query: Query string such as 'query=pizza%20near%20me&radius=10000'.

        Returns:
            The decoded top-level JSON object.

        Raises:
            UpstreamError: On an invalid URL, network failure, timeout, non-200 status
                or malformed JSON.
        """
        if self._language:
            encoded_query = f"{encoded_query}&language={quote(self._language, safe='')}"
        display_url = f"{url}?{encoded_query}"
        log_api_request("GET", display_url)
        try:
            target = URL(f"{display_url}&key={quote(self._api_key, safe='')}", encoded=True)
        except ValueError as e:
            logger.error(f"Invalid request URL {display_url}: {e}")
            raise UpstreamError(ErrorKind.NETWORK_FAILURE, f"Invalid request URL: {e}") from e
        return await self._fetch(target, display_url, None)

    async def _fetch(
        self, target: str | URL, display_url: str, params: dict[str, str | int] | None
    ) -> dict[str, Any]:
        """Perform the request and decode the body."""
        try:
            async with self._session.get(
                target, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                status = response.status
                body = await response.text()
        except asyncio.TimeoutError as e:
            logger.warning(f"Request to {display_url} timed out")
            raise UpstreamError(ErrorKind.TIMEOUT, "Request timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Network error for {display_url}: {e}")
            raise UpstreamError(ErrorKind.NETWORK_FAILURE, f"Network error: {e}") from e
        except UnicodeDecodeError as e:
            logger.error(f"Undecodable response body from {display_url}: {e}")
            raise UpstreamError(ErrorKind.MALFORMED_RESPONSE, "Response is not valid text") from e

        log_api_response(display_url, status, body)

        if status != 200:
            logger.error(f"Google Maps API returned status {status} for {display_url}")
            logger.debug(f"Response body: {body[:200]}")
            raise UpstreamError(
                ErrorKind.NETWORK_FAILURE, f"HTTP {status} from Google Maps API", status_code=status
            )

        return self._decode(body, display_url)

    @staticmethod
    def _decode(body: str, display_url: str) -> dict[str, Any]:
        """Decode a JSON object body."""
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON from {display_url}: {e}")
            raise UpstreamError(ErrorKind.MALFORMED_RESPONSE, "Invalid JSON in response") from e

        if not isinstance(data, dict):
            logger.error(f"Unexpected JSON payload from {display_url}: {type(data).__name__}")
            raise UpstreamError(ErrorKind.MALFORMED_RESPONSE, "Expected a JSON object")
        return data
