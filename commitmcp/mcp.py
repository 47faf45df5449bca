#!/usr/bin/env python3

from mcp.server.fastmcp import FastMCP

# Initialize FastMCP server
mcp = FastMCP(
    "commitmcp",
    instructions=(
        "Git tools: inspect repository status, generate conventional commit "
        "messages, commit changes, and split a working tree into several "
        "classified commits with smart_commit."
    ),
)

__all__ = [
    "mcp",
]
