"""
YouTube MCP Server

This MCP server exposes YouTube videos, transcripts, channels and playlists to AI
agents as seven tools over stdio.

## Environment Variables
- YOUTUBE_API_KEY: Required. API key for YouTube Data API v3. Validated when a tool
  is first called, not at startup.
- YOUTUBE_TRANSCRIPT_LANG: Optional. Default transcript language (default: "en").
- LOG_LEVEL: Optional. Log level for the diagnostic output on stderr.

## Tools
- videos_getVideo, videos_searchVideos
- transcripts_getTranscript
- channels_getChannel, channels_listVideos
- playlists_getPlaylist, playlists_getPlaylistItems

Every tool answers with a single text block: the pretty-printed JSON result, or
"Error: <message>" flagged as an error result.
"""

import json
import logging
import sys
from typing import Annotated, Any, Awaitable, Callable, Dict, List, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import TextContent
from pydantic import Field

from youtube_mcp.config import Config
from youtube_mcp.services import ChannelService, PlaylistService, TranscriptService, VideoService

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

Operation = Callable[[Dict[str, Any]], Awaitable[Any]]

VideoId = Annotated[str, Field(description="The YouTube video ID")]
ChannelId = Annotated[str, Field(description="The YouTube channel ID")]
PlaylistId = Annotated[str, Field(description="The YouTube playlist ID")]
MaxResults = Annotated[Optional[int], Field(description="Maximum number of results to return")]


async def respond(operation: Operation, **params: Any) -> List[TextContent]:
    """
    Run one adapter call and wrap its outcome in the tool result envelope.

    Parameters left unset by the caller are dropped, the rest are passed to the
    adapter as one mapping. Any failure is logged and reported as a ToolError,
    which FastMCP returns verbatim as an error result.

    Args:
        operation: Adapter method taking the parameter mapping
        **params: Tool parameters as received

    Returns:
        A single text block with the indented JSON result
    """
    arguments = {name: value for name, value in params.items() if value is not None}
    try:
        result = await operation(arguments)
        text = json.dumps(result, indent=2, ensure_ascii=False)
    except Exception as e:
        logger.warning("%s failed: %s", getattr(operation, "__name__", "tool call"), e)
        raise ToolError(f"Error: {e}") from e
    return [TextContent(type="text", text=text)]


def create_server(
    video_service: Optional[VideoService] = None,
    transcript_service: Optional[TranscriptService] = None,
    channel_service: Optional[ChannelService] = None,
    playlist_service: Optional[PlaylistService] = None,
) -> FastMCP:
    """Build the FastMCP server and register the seven YouTube tools."""
    # Services only build their API clients when a tool is called
    videos = video_service if video_service is not None else VideoService()
    transcripts = transcript_service if transcript_service is not None else TranscriptService()
    channels = channel_service if channel_service is not None else ChannelService()
    playlists = playlist_service if playlist_service is not None else PlaylistService()

    mcp = FastMCP(Config.SERVER_NAME, instructions=Config.SERVER_DESCRIPTION)

    @mcp.tool(name="videos_getVideo", description="Get detailed information about a YouTube video")
    async def get_video(
        videoId: VideoId,
        parts: Annotated[Optional[List[str]], Field(description="Parts of the video to retrieve")] = None,
    ):
        return await respond(videos.get_video, videoId=videoId, parts=parts)

    @mcp.tool(name="videos_searchVideos", description="Search for videos on YouTube")
    async def search_videos(
        query: Annotated[str, Field(description="Search query")],
        maxResults: MaxResults = None,
    ):
        return await respond(videos.search_videos, query=query, maxResults=maxResults)

    @mcp.tool(name="transcripts_getTranscript", description="Get the transcript of a YouTube video")
    async def get_transcript(
        videoId: VideoId,
        language: Annotated[Optional[str], Field(description="Language code for the transcript")] = None,
    ):
        return await respond(transcripts.get_transcript, videoId=videoId, language=language)

    @mcp.tool(name="channels_getChannel", description="Get information about a YouTube channel")
    async def get_channel(channelId: ChannelId):
        return await respond(channels.get_channel, channelId=channelId)

    @mcp.tool(name="channels_listVideos", description="Get videos from a specific channel")
    async def list_channel_videos(channelId: ChannelId, maxResults: MaxResults = None):
        return await respond(channels.list_videos, channelId=channelId, maxResults=maxResults)

    @mcp.tool(name="playlists_getPlaylist", description="Get information about a YouTube playlist")
    async def get_playlist(playlistId: PlaylistId):
        return await respond(playlists.get_playlist, playlistId=playlistId)

    @mcp.tool(name="playlists_getPlaylistItems", description="Get videos in a YouTube playlist")
    async def get_playlist_items(playlistId: PlaylistId, maxResults: MaxResults = None):
        return await respond(playlists.get_playlist_items, playlistId=playlistId, maxResults=maxResults)

    return mcp


mcp = create_server()


def main() -> None:
    logging.basicConfig(level=Config.log_level(), format=LOG_FORMAT, stream=sys.stderr)
    logger.info("%s v%s started successfully", Config.SERVER_NAME, Config.SERVER_VERSION)
    logger.info("Server will validate YouTube API key when tools are called")
    mcp.run()


if __name__ == "__main__":
    main()
