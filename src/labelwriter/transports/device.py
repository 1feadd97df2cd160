"""Direct device transport, e.g. /dev/usb/lp0."""

import asyncio
import logging

from labelwriter.errors import ConfigError, DeviceWriteError
from labelwriter.transports.base import BaseTransport

logger = logging.getLogger(__name__)


class DeviceTransport(BaseTransport):
    """Write print jobs straight to a character device or file."""

    def __init__(self, device: str | None) -> None:
        if not device:
            raise ConfigError("Cannot write to device, the device name is empty")
        self.device = device

    def describe(self) -> str:
        return self.device

    async def send(self, data: bytes) -> None:
        # Run blocking device write in executor
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._write, data)
        except OSError as e:
            raise DeviceWriteError(f"Failed to write to {self.device}: {e}") from e
        logger.debug(f"Wrote {len(data)} bytes to {self.device}")

    def _write(self, data: bytes) -> None:
        with open(self.device, "wb") as f:
            f.write(data)
