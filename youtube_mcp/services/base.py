"""Shared lazy client handling for the service adapters."""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationInfo

from youtube_mcp.client import YouTubeClient
from youtube_mcp.config import Config

logger = logging.getLogger(__name__)


class ServiceRequest(BaseModel):
    '''Base for adapter inputs: accepts camelCase tool parameters or snake_case names'''
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


def require_identifier(v: str, info: ValidationInfo) -> str:
    """Reject blank identifiers; anything deeper is left to the YouTube API"""
    if not v:
        raise ValueError(f"{info.field_name} cannot be empty")
    return v


class BaseService:
    """
    Owns one client handle per adapter instance.

    The handle is built on first use, so a missing API key only surfaces when a
    tool is called. Concurrent first calls may both build a client; the last one
    is kept, which is harmless since the client holds nothing but the key.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._transport = transport
        self._client: Optional[Any] = None

    def _create_client(self) -> Any:
        return YouTubeClient(Config.youtube_api_key(), transport=self._transport)

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self._create_client()
            logger.debug("%s client initialized", type(self).__name__)
        return self._client

    async def close(self) -> None:
        if self._client is not None and hasattr(self._client, "aclose"):
            await self._client.aclose()
        self._client = None
