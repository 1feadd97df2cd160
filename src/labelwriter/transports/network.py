"""Raw TCP transport (port 9100 convention)."""

import asyncio
import contextlib
import logging

from labelwriter.errors import PrinterConnectionError, PrinterTimeoutError
from labelwriter.transports.base import BaseTransport

logger = logging.getLogger(__name__)

DEFAULT_PORT = 9100
DEFAULT_TIMEOUT = 30.0


class NetworkTransport(BaseTransport):
    """Send print jobs over a plain TCP socket."""

    def __init__(self, host: str = "localhost", port: int = DEFAULT_PORT, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.host = host or "localhost"
        self.port = port or DEFAULT_PORT
        self.timeout = timeout

    def describe(self) -> str:
        return f"{self.host}:{self.port}"

    async def send(self, data: bytes) -> None:
        """Connect, write the whole job and close.

        Connecting and writing share one timeout window.
        """
        try:
            await asyncio.wait_for(self._deliver(data), timeout=self.timeout)
        except TimeoutError as e:
            raise PrinterTimeoutError(f"Timeout sending to printer at {self.describe()}") from e
        except OSError as e:
            raise PrinterConnectionError(f"Failed to send to printer at {self.describe()}: {e}") from e
        logger.debug(f"Sent {len(data)} bytes to {self.describe()}")

    async def _deliver(self, data: bytes) -> None:
        _reader, writer = await asyncio.open_connection(self.host, self.port)
        try:
            writer.write(data)
            await writer.drain()
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()
        except BaseException:
            # Drop unsent data, a graceful close waits for a stalled peer to read it
            writer.transport.abort()
            raise
