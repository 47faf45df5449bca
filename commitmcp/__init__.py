#!/usr/bin/env python3

from .main import cli, configure_logging, run
from .mcp import mcp
from .shell import get_subprocess_env, run_command

__all__ = [
    "configure_logging",
    "run",
    "mcp",
    "run_command",
    "get_subprocess_env",
    "cli",
]
