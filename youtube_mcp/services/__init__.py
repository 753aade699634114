"""Service adapters translating tool parameters into YouTube API calls."""

from youtube_mcp.services.channel import ChannelService
from youtube_mcp.services.playlist import PlaylistService
from youtube_mcp.services.transcript import TranscriptService
from youtube_mcp.services.video import VideoService

__all__ = [
    "ChannelService",
    "PlaylistService",
    "TranscriptService",
    "VideoService",
]
