"""Channel lookups against the YouTube Data API."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import Field, ValidationInfo, field_validator

from youtube_mcp.services.base import BaseService, ServiceRequest, require_identifier

DEFAULT_CHANNEL_VIDEOS_MAX_RESULTS = 50


class GetChannelRequest(ServiceRequest):
    channel_id: str = Field(..., alias="channelId", description="The YouTube channel ID")

    @field_validator('channel_id')
    @classmethod
    def validate_channel_id(cls, v: str, info: ValidationInfo) -> str:
        """Validate channel_id is present"""
        return require_identifier(v, info)


class ListChannelVideosRequest(GetChannelRequest):
    max_results: Optional[int] = Field(None, alias="maxResults", description="Maximum number of results to return")


class ChannelService(BaseService):
    """Adapter for the channels resource and channel-scoped search."""

    async def get_channel(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        request = GetChannelRequest.model_validate(params)
        return await self.client.get_item(
            "channels",
            {"part": "snippet,statistics,contentDetails", "id": request.channel_id},
            label="Channel",
        )

    async def list_videos(self, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Latest videos of a channel, newest first, one page of maxResults (default 50)"""
        request = ListChannelVideosRequest.model_validate(params)
        return await self.client.list_items(
            "search",
            {
                "part": "snippet",
                "channelId": request.channel_id,
                "order": "date",
                "type": "video",
                "maxResults": request.max_results or DEFAULT_CHANNEL_VIDEOS_MAX_RESULTS,
            },
        )
