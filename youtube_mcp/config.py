"""
Configuration for the YouTube MCP Server.

## Environment Variables
- YOUTUBE_API_KEY: Required when a tool is called. API key for YouTube Data API v3.
  It is read lazily, so the server starts without it and reports the problem on the
  first tool call.
- YOUTUBE_TRANSCRIPT_LANG: Optional. Default transcript language (default: "en").
- LOG_LEVEL: Optional. Logging level for the server (default: "INFO").

A .env file in the working directory is loaded if present.
"""

import logging
import os

from dotenv import load_dotenv

from youtube_mcp import __version__
from youtube_mcp.errors import ConfigurationError

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TRANSCRIPT_LANGUAGE = "en"


class Config:
    '''Configuration with lazy environment variable validation'''
    SERVER_NAME = "YouTube MCP Server"
    SERVER_VERSION = __version__
    SERVER_DESCRIPTION = "MCP Server for interacting with YouTube content and services"

    YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"

    @classmethod
    def youtube_api_key(cls) -> str:
        '''Return the API key, or raise ConfigurationError if it is not set'''
        api_key = (os.getenv("YOUTUBE_API_KEY") or "").strip()
        if not api_key:
            raise ConfigurationError(
                "YOUTUBE_API_KEY environment variable is required. "
                "Obtain a key from Google Cloud Console with YouTube Data API v3 enabled."
            )
        return api_key

    @classmethod
    def transcript_language(cls) -> str:
        return os.getenv("YOUTUBE_TRANSCRIPT_LANG") or DEFAULT_TRANSCRIPT_LANGUAGE

    @classmethod
    def log_level(cls) -> int:
        '''Numeric log level from LOG_LEVEL, falling back to INFO on unknown names'''
        name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        level = getattr(logging, name, None)
        if not isinstance(level, int):
            return getattr(logging, DEFAULT_LOG_LEVEL)
        return level
