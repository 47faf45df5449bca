#!/usr/bin/env python3

from ..commit_types import render_commit_types_table
from ..mcp import mcp

__all__ = [
    "list_commit_types",
]


@mcp.tool()
async def list_commit_types() -> str:
    """List all supported commit types with their emoji and description."""
    return render_commit_types_table()
