"""YouTube MCP Server: videos, transcripts, channels and playlists as MCP tools."""

__version__ = "1.0.0"
