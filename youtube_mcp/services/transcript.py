"""Transcript retrieval through youtube-transcript-api."""

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, ValidationInfo, field_validator
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from youtube_mcp.config import Config
from youtube_mcp.errors import NotFoundError, UpstreamError
from youtube_mcp.services.base import BaseService, ServiceRequest, require_identifier

logger = logging.getLogger(__name__)


class GetTranscriptRequest(ServiceRequest):
    video_id: str = Field(..., alias="videoId", description="The YouTube video ID")
    language: Optional[str] = Field(None, description="Language code for the transcript")

    @field_validator('video_id')
    @classmethod
    def validate_video_id(cls, v: str, info: ValidationInfo) -> str:
        """Validate video_id is present"""
        return require_identifier(v, info)


class TranscriptService(BaseService):
    """
    Adapter for video captions.

    The handle is a YouTubeTranscriptApi instance. It does not use the Data API
    key, but construction still requires one so every adapter reports a missing
    credential the same way.
    """

    def _create_client(self) -> YouTubeTranscriptApi:
        Config.youtube_api_key()
        return YouTubeTranscriptApi()

    async def get_transcript(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Fetch the caption track of a video.

        Args:
            params: {'videoId': ..., 'language': ...}; language defaults to
                YOUTUBE_TRANSCRIPT_LANG, then 'en'

        Returns:
            {'videoId', 'language', 'transcript': [{'text', 'start', 'duration'}, ...]}
        """
        request = GetTranscriptRequest.model_validate(params)
        language = request.language or Config.transcript_language()
        client = self.client

        logger.debug("Fetching %s transcript for %s", language, request.video_id)
        try:
            fetched = await asyncio.to_thread(client.fetch, request.video_id, languages=[language])
        except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as e:
            raise NotFoundError(
                f"No {language} transcript available for video {request.video_id}"
            ) from e
        except CouldNotRetrieveTranscript as e:
            raise UpstreamError(f"Transcript request failed for video {request.video_id}: {e}") from e

        return {
            "videoId": request.video_id,
            "language": language,
            "transcript": fetched.to_raw_data(),
        }
