"""Video lookups and search against the YouTube Data API."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import Field, ValidationInfo, field_validator

from youtube_mcp.services.base import BaseService, ServiceRequest, require_identifier

DEFAULT_VIDEO_PARTS = ["snippet", "contentDetails", "statistics"]
DEFAULT_SEARCH_MAX_RESULTS = 10


class GetVideoRequest(ServiceRequest):
    video_id: str = Field(..., alias="videoId", description="The YouTube video ID")
    parts: Optional[List[str]] = Field(None, description="Parts of the video to retrieve")

    @field_validator('video_id')
    @classmethod
    def validate_video_id(cls, v: str, info: ValidationInfo) -> str:
        """Validate video_id is present"""
        return require_identifier(v, info)


class SearchVideosRequest(ServiceRequest):
    query: str = Field(..., description="Search query")
    max_results: Optional[int] = Field(None, alias="maxResults", description="Maximum number of results to return")

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str, info: ValidationInfo) -> str:
        """Validate search query"""
        return require_identifier(v, info)


class VideoService(BaseService):
    """Adapter for the videos and search resources."""

    async def get_video(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Get detailed information about a video.

        Args:
            params: {'videoId': ..., 'parts': [...]} as passed to the tool

        Returns:
            The video resource with the requested parts
        """
        request = GetVideoRequest.model_validate(params)
        parts = request.parts or DEFAULT_VIDEO_PARTS
        return await self.client.get_item(
            "videos",
            {"part": ",".join(parts), "id": request.video_id},
            label="Video",
        )

    async def search_videos(self, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """
        Search for videos matching a query.

        Returns one page of search results, sized by maxResults (default 10).
        """
        request = SearchVideosRequest.model_validate(params)
        return await self.client.list_items(
            "search",
            {
                "part": "snippet",
                "q": request.query,
                "type": "video",
                "maxResults": request.max_results or DEFAULT_SEARCH_MAX_RESULTS,
            },
        )
