"""Async client for the YouTube Data API v3."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from youtube_mcp.config import Config
from youtube_mcp.errors import MalformedResponseError, NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Pull Google's error message out of a failed response, falling back to the raw body"""
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return payload["error"].get("message") or response.text
    return response.text


class YouTubeClient:
    """
    Thin wrapper around httpx.AsyncClient bound to the Data API and an API key.

    Every request sends the key as the 'key' query parameter. Failures surface as
    UpstreamError (error status or transport failure) or MalformedResponseError
    (body that is not a JSON object).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = Config.YOUTUBE_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            params={"key": api_key},
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def get(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a GET request against a Data API resource.

        Args:
            endpoint: Resource name, e.g. 'videos' or 'playlistItems'
            params: Query parameters; None values are dropped

        Returns:
            The decoded JSON object
        """
        query = {name: value for name, value in params.items() if value is not None}
        logger.debug("YouTube API request: %s %s", endpoint, query)
        try:
            response = await self._http.get(f"/{endpoint}", params=query)
        except httpx.HTTPError as e:
            raise UpstreamError(f"YouTube API request failed: {e}") from e

        if response.status_code == 404:
            raise NotFoundError(_error_message(response))
        if response.status_code != 200:
            raise UpstreamError(
                f"YouTube API request failed: {response.status_code} - {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"YouTube API returned invalid JSON for {endpoint}") from e
        if not isinstance(data, dict):
            raise MalformedResponseError(f"YouTube API returned unexpected payload for {endpoint}")
        return data

    async def list_items(self, endpoint: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Call a *.list resource and return its 'items' page unchanged"""
        data = await self.get(endpoint, params)
        items = data.get("items", [])
        if not isinstance(items, list):
            raise MalformedResponseError(f"YouTube API returned non-list items for {endpoint}")
        return items

    async def get_item(self, endpoint: str, params: Dict[str, Any], label: str) -> Dict[str, Any]:
        """Call a *.list resource filtered by id and return the single matching item"""
        items = await self.list_items(endpoint, params)
        if not items:
            raise NotFoundError(f"{label} not found: {params.get('id')}")
        return items[0]

    async def aclose(self) -> None:
        await self._http.aclose()
