"""Run external commands (spooler, printer listing, raw-print helper)."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from labelwriter.errors import ProcessError

logger = logging.getLogger(__name__)

CommandRunner = Callable[..., Awaitable[str]]


async def execute(command: str, args: Sequence[str] = (), stdin: bytes | None = None) -> str:
    """Run a command and return its standard output.

    Args:
        command: Executable name or path.
        args: Command arguments.
        stdin: Optional binary data written to the command's standard input.

    Returns:
        Captured standard output, decoded as UTF-8.

    Raises:
        ProcessError: If the command cannot be launched or exits non-zero.
    """
    logger.debug(f"Running {command} {' '.join(args)}")
    try:
        process = await asyncio.create_subprocess_exec(
            command,
            *args,
            stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ProcessError(command, None, str(e)) from e

    stdout, stderr = await process.communicate(stdin)
    if process.returncode != 0:
        raise ProcessError(command, process.returncode, stderr.decode("utf-8", errors="replace"))
    return stdout.decode("utf-8", errors="replace")
