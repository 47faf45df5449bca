#!/usr/bin/env python3


import asyncio
import os
import subprocess
import sys
import tempfile
import unittest
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional, Union
from unittest import mock

from expecttest import TestCase
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

__all__ = [
    "MCPEndToEndTestCase",
]


class MCPEndToEndTestCase(TestCase, unittest.IsolatedAsyncioTestCase):
    """Base class for end-to-end tests of commitmcp tools against a real repository."""

    in_process: bool = True

    async def asyncSetUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.testing_time = "1112911993"  # Fixed timestamp for git

        self.env = os.environ.copy()
        self.env.setdefault("GIT_TERMINAL_PROMPT", "0")
        self.env.setdefault("EDITOR", ":")
        self.env.setdefault("GIT_MERGE_AUTOEDIT", "no")
        self.env.setdefault("LANG", "C")
        self.env.setdefault("LC_ALL", "C")
        self.env.setdefault("PAGER", "cat")
        self.env.setdefault("TZ", "UTC")
        self.env.setdefault("TERM", "dumb")
        self.env.setdefault("GIT_AUTHOR_EMAIL", "author@example.com")
        self.env.setdefault("GIT_AUTHOR_NAME", "A U Thor")
        self.env.setdefault("GIT_COMMITTER_EMAIL", "committer@example.com")
        self.env.setdefault("GIT_COMMITTER_NAME", "C O Mitter")
        self.env.setdefault("GIT_COMMITTER_DATE", f"{self.testing_time} -0700")
        self.env.setdefault("GIT_AUTHOR_DATE", f"{self.testing_time} -0700")
        # Keep the user's hooks and signing config out of test commits
        self.env["GIT_CONFIG_GLOBAL"] = os.devnull
        self.env["GIT_CONFIG_NOSYSTEM"] = "1"

        self.env_patcher = mock.patch(
            "commitmcp.shell.get_subprocess_env", return_value=self.env
        )
        self.env_patcher.start()

        await self.setup_repository()

    async def asyncTearDown(self):
        self.env_patcher.stop()
        self.temp_dir.cleanup()

    async def setup_repository(self):
        """Initialize a git repository with a single README commit.

        Subclasses can override this to customize the repository setup.
        """
        try:
            await self.git_run(["init", "-b", "main"])
        except subprocess.CalledProcessError:
            self.fail(
                "git version is too old for tests! Please install a newer version of git."
            )
        await self.git_run(["config", "user.email", "test@example.com"])
        await self.git_run(["config", "user.name", "Test User"])
        await self.git_run(["config", "commit.gpgsign", "false"])

        self.write_file("README.md", "# Test Repository\n")
        await self.git_run(["add", "README.md"])
        await self.git_run(["commit", "-m", "Initial commit"])

    def write_file(self, rel_path: str, content: str) -> str:
        """Write a file inside the test repository and return its absolute path."""
        full_path = os.path.join(self.temp_dir.name, rel_path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w") as f:
            f.write(content)
        return full_path

    def normalize_path(self, text: Any) -> Any:
        """Replace the temporary directory path in output text."""
        if isinstance(text, str) and self.temp_dir and self.temp_dir.name:
            return text.replace(self.temp_dir.name, "/tmp/test_dir")
        return text

    def extract_text_from_result(self, result: Any) -> str:
        """Extract text content from a tool result (string or list of TextContent)."""
        if isinstance(result, str):
            return result

        if isinstance(result, list):
            if not result:
                return "[]"
            obj = result[0]
            text_attr = getattr(obj, "text", None)
            if isinstance(text_attr, str):
                return text_attr
            return str(result)

        return str(result)

    async def _dispatch_to_tool(self, tool: str, kwargs: Dict[str, Any]) -> Any:
        """Call a tool function directly by its MCP tool name."""
        from commitmcp import tools

        func = getattr(tools, tool, None)
        if func is None or tool not in tools.__all__:
            raise ValueError(f"Unknown tool: {tool}")
        return await func(**kwargs)

    async def call_tool(
        self,
        session: Optional[ClientSession],
        tool_name: str,
        tool_params: Dict[str, Any],
    ) -> str:
        """Call a tool in process or over the session and return its text.

        Tools report git failures as text, so both paths expect the call
        itself to succeed.
        """
        if self.in_process:
            result = await self._dispatch_to_tool(tool_name, tool_params)
            return self.extract_text_from_result(self.normalize_path(result))

        assert session is not None, "Session cannot be None when in_process=False"
        result = await session.call_tool(tool_name, tool_params)
        self.assertFalse(result.isError, result)
        return self.normalize_path(self.extract_text_from_result(result.content))

    @asynccontextmanager
    async def create_client_session(
        self,
    ) -> AsyncGenerator[Optional[ClientSession], None]:
        """Create an MCP client session connected to a commitmcp server."""
        if self.in_process:
            yield None
            return

        server_params = StdioServerParameters(
            command=sys.executable,
            args=["-m", "commitmcp"],
            env=self.env,
            cwd=self.temp_dir.name,
        )

        async with stdio_client(server_params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                yield session

    async def git_run(
        self,
        args: List[str],
        check: bool = True,
        capture_output: bool = False,
        text: bool = False,
        **kwargs: Any,
    ) -> Union[subprocess.CompletedProcess[bytes], str]:
        """Run git in the test repository with the test environment.

        Args:
            args: List of git command arguments (without 'git' prefix)
            check: If True, raises if the command returns a non-zero exit code
            capture_output: If True, captures stdout and stderr
            text: If True (with capture_output), return stripped stdout as a string
            **kwargs: Additional keyword arguments for create_subprocess_exec

        Example:
            log_output = await self.git_run(["log", "--oneline"], capture_output=True, text=True)
        """
        cmd = ["git"] + args

        kwargs.setdefault("cwd", self.temp_dir.name)
        kwargs.setdefault("env", self.env)

        if capture_output:
            kwargs.setdefault("stdout", subprocess.PIPE)
            kwargs.setdefault("stderr", subprocess.PIPE)

        proc = await asyncio.create_subprocess_exec(
            *cmd,
            **kwargs,
        )

        stdout, stderr = await proc.communicate()

        result = subprocess.CompletedProcess[bytes](
            args=cmd,
            returncode=proc.returncode or 0,
            stdout=stdout,
            stderr=stderr,
        )

        if check and proc.returncode and proc.returncode != 0:
            cmd_str = " ".join(cmd)
            raise subprocess.CalledProcessError(
                proc.returncode, cmd_str, output=stdout, stderr=stderr
            )

        if capture_output and text:
            return stdout.decode().strip() if stdout else ""
        return result
