"""Windows raw printing transport.

Jobs are handed to a RawPrint style helper (``RP.exe <printer> <file>``) that
writes the file to the printer queue with the RAW datatype.
"""

import contextlib
import logging
import os
import tempfile

from labelwriter.errors import ConfigError, ProcessError, SpoolerError
from labelwriter.system import CommandRunner, execute
from labelwriter.transports.base import BaseTransport

logger = logging.getLogger(__name__)


class WindowsTransport(BaseTransport):
    """Print through the Windows spooler using a raw-print helper."""

    def __init__(
        self,
        device_id: str | None,
        runner: CommandRunner = execute,
        helper: str = "RP.exe",
    ) -> None:
        if not device_id:
            raise ConfigError("Cannot print to Windows printer, device_id is not configured")
        self.device_id = device_id
        self.helper = helper
        self._runner = runner

    def describe(self) -> str:
        return f"windows:{self.device_id}"

    async def send(self, data: bytes) -> None:
        try:
            fd, path = tempfile.mkstemp(prefix="labelwriter.", suffix=".bin")
        except OSError as e:
            raise SpoolerError(f"Cannot create job file for {self.device_id}: {e}") from e
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            await self._runner(self.helper, [self.device_id, path])
        except ProcessError as e:
            raise SpoolerError(f"Raw print to {self.device_id} failed: {e}") from e
        except OSError as e:
            raise SpoolerError(f"Cannot write job file {path}: {e}") from e
        finally:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(path)
        logger.debug(f"Sent {len(data)} bytes to Windows printer {self.device_id}")
