#!/usr/bin/env python3

import asyncio
import logging
import subprocess
from typing import Dict, List, Optional

from .errors import ExternalToolError

__all__ = [
    "run_command",
    "get_subprocess_env",
]


def get_subprocess_env() -> Optional[Dict[str, str]]:
    """
    Get the environment variables to be used for subprocess execution.
    This function can be mocked in tests to control the environment.

    Returns:
        Optional dictionary of environment variables, or None to use the current environment.
    """
    return None


async def run_command(
    cmd: List[str],
    cwd: Optional[str] = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """
    Run a subprocess command with consistent logging asynchronously.

    The caller awaits the process to completion, so awaiting several calls
    one after another never overlaps them.  Output is always captured and
    decoded as text.

    Args:
        cmd: Command to run as a list of strings
        cwd: Current working directory for the command
        check: If True, raise RuntimeError if the command returns non-zero exit code

    Returns:
        CompletedProcess instance with attributes args, returncode, stdout, stderr

    Raises:
        RuntimeError: If check=True and process returns non-zero exit code
        ExternalToolError: If the process could not be launched
    """
    # Log the command being run at INFO level
    log_cmd = " ".join(str(c) for c in cmd)
    logging.info(f"Running command: {log_cmd}")

    # Launch failures include a missing executable (OSError) and arguments
    # the OS cannot accept, such as an embedded NUL byte (ValueError)
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=cwd,
            env=get_subprocess_env(),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        logging.error(f"Failed to launch {cmd[0]}: {e}")
        raise ExternalToolError(f"Failed to run {cmd[0]}: {e}") from e

    # No timeout: a hung command blocks until it exits
    stdout_data, stderr_data = await process.communicate()

    # Handle text conversion
    stdout = stdout_data.decode(errors="replace") if stdout_data else ""
    stderr = stderr_data.decode(errors="replace") if stderr_data else ""
    if stdout:
        logging.debug(f"Command stdout: {stdout}")
    if stderr:
        logging.debug(f"Command stderr: {stderr}")

    # Log the return code
    returncode = process.returncode
    logging.debug(f"Command return code: {returncode}")

    result = subprocess.CompletedProcess[str](
        args=cmd,
        returncode=0 if returncode is None else returncode,
        stdout=stdout,
        stderr=stderr,
    )

    # Raise RuntimeError if check is True and command failed
    if check and result.returncode != 0:
        error_message = f"Command failed with exit code {result.returncode}: {log_cmd}"
        if result.stdout:
            error_message += f"\nStdout: {result.stdout}"
        if result.stderr:
            error_message += f"\nStderr: {result.stderr}"
        raise RuntimeError(error_message)

    return result
