from youtube_mcp.server import main

main()
