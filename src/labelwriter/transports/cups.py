"""CUPS spooler transport (macOS, Linux)."""

import logging

from labelwriter.errors import ConfigError, ProcessError, SpoolerError
from labelwriter.system import CommandRunner, execute
from labelwriter.transports.base import BaseTransport

logger = logging.getLogger(__name__)


class CupsTransport(BaseTransport):
    """Submit print jobs to a CUPS queue with ``lp``.

    The queue must be set up as a raw queue for the printer to receive the
    command stream unchanged.
    """

    def __init__(self, device_id: str | None, runner: CommandRunner = execute) -> None:
        if not device_id:
            raise ConfigError("Cannot print to CUPS printer, device_id is not configured")
        self.device_id = device_id
        self._runner = runner

    def describe(self) -> str:
        return f"cups:{self.device_id}"

    async def send(self, data: bytes) -> None:
        try:
            await self._runner("lp", ["-d", self.device_id], stdin=data)
        except ProcessError as e:
            raise SpoolerError(f"CUPS rejected job for {self.device_id}: {e}") from e
        logger.debug(f"Submitted {len(data)} bytes to CUPS queue {self.device_id}")
