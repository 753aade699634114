"""Playlist lookups against the YouTube Data API."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import Field, ValidationInfo, field_validator

from youtube_mcp.services.base import BaseService, ServiceRequest, require_identifier

DEFAULT_PLAYLIST_ITEMS_MAX_RESULTS = 50


class GetPlaylistRequest(ServiceRequest):
    playlist_id: str = Field(..., alias="playlistId", description="The YouTube playlist ID")

    @field_validator('playlist_id')
    @classmethod
    def validate_playlist_id(cls, v: str, info: ValidationInfo) -> str:
        """Validate playlist_id is present"""
        return require_identifier(v, info)


class GetPlaylistItemsRequest(GetPlaylistRequest):
    max_results: Optional[int] = Field(None, alias="maxResults", description="Maximum number of results to return")


class PlaylistService(BaseService):
    """Adapter for the playlists and playlistItems resources."""

    async def get_playlist(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        request = GetPlaylistRequest.model_validate(params)
        return await self.client.get_item(
            "playlists",
            {"part": "snippet,contentDetails", "id": request.playlist_id},
            label="Playlist",
        )

    async def get_playlist_items(self, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """
        Videos in a playlist, in playlist order.

        Only the first page is fetched, sized by maxResults (default 50).
        """
        request = GetPlaylistItemsRequest.model_validate(params)
        return await self.client.list_items(
            "playlistItems",
            {
                "part": "snippet,contentDetails",
                "playlistId": request.playlist_id,
                "maxResults": request.max_results or DEFAULT_PLAYLIST_ITEMS_MAX_RESULTS,
            },
        )
