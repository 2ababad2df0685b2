"""Characters API client.

Provides functionality to:
- Fetch the status code of an endpoint URL
- Fetch and parse one page of characters
- Build the base and name-filtered endpoint URLs
"""

import httpx
from pydantic import ValidationError
from result import Err, Ok, Result

from disney_smoke.config import Settings, get_settings
from disney_smoke.failures import (
    INVALID_DATA_ARRAY_MESSAGE,
    ShapeMismatch,
    TransportFailure,
)
from disney_smoke.schemas.character import CharacterPage
from disney_smoke.utils.logging import get_logger

logger = get_logger(__name__)


class CharacterApiClient:
    """Client for characters endpoint HTTP operations.

    Every call opens its own `httpx.AsyncClient`; nothing is cached or
    shared between calls.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize client.

        Args:
            settings: Harness settings. Falls back to get_settings() if None.
        """
        self.settings = settings or get_settings()
        self.headers = {"Accept": "application/json"}

    @property
    def base_url(self) -> str:
        """URL of the first page of characters."""
        return self.settings.api_url

    def name_query_url(self, name: str) -> str:
        """URL filtering characters by name.

        The name is embedded as-is; httpx percent-encodes it on the wire.
        """
        return f"{self.base_url}?name={name}"

    async def _get(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                url, headers=self.headers, timeout=self.settings.request_timeout
            )
        logger.debug(f"GET {url} -> {response.status_code}")
        return response

    async def fetch_status(self, url: str) -> Result[int, TransportFailure]:
        """Fetch a URL and report its HTTP status code.

        Args:
            url: The URL to request

        Returns:
            Result containing the status code or a transport failure
        """
        try:
            response = await self._get(url)
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e!r}")
            return Err(TransportFailure(url=url, reason=str(e) or type(e).__name__))

        return Ok(response.status_code)

    async def fetch_page(
        self, url: str
    ) -> Result[CharacterPage, TransportFailure | ShapeMismatch]:
        """Fetch a URL and parse the body as a page of characters.

        The status code is not enforced here; a non-success status is only
        logged and the body is still inspected.

        Args:
            url: The URL to request

        Returns:
            Result containing the parsed page or the failure
        """
        try:
            response = await self._get(url)
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e!r}")
            return Err(TransportFailure(url=url, reason=str(e) or type(e).__name__))

        if response.status_code != self.settings.expected_status_code:
            logger.warning(
                f"Unexpected status {response.status_code} from {url}, "
                "inspecting body anyway"
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Non-JSON body from {url}: {e}")
            return Err(ShapeMismatch(f"Response body is not valid JSON: {e}"))

        try:
            page = CharacterPage.model_validate(body)
        except ValidationError as e:
            logger.debug(f"Body from {url} failed validation: {e}")
            return Err(ShapeMismatch(INVALID_DATA_ARRAY_MESSAGE))

        return Ok(page)
