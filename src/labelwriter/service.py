"""LabelWriter print service."""

import logging
from collections.abc import Mapping
from typing import Any

from PIL import Image
from pydantic import ValidationError

from labelwriter import discovery
from labelwriter.errors import ConfigError
from labelwriter.imaging import image_to_bitmap
from labelwriter.models.printer import PrinterConfig, PrinterDescriptor
from labelwriter.protocol.encoder import Bitmap, encode_bitmap
from labelwriter.system import CommandRunner, execute
from labelwriter.transports import create_transport

logger = logging.getLogger(__name__)


def validate_config(config: PrinterConfig | Mapping[str, Any] | None) -> PrinterConfig:
    """Build a PrinterConfig, failing fast on invalid values.

    Raises:
        ConfigError: If the configuration does not validate.
    """
    if config is None:
        return PrinterConfig()
    if isinstance(config, PrinterConfig):
        return config
    try:
        return PrinterConfig.model_validate(dict(config))
    except ValidationError as e:
        raise ConfigError(f"Invalid printer configuration: {e}") from e


class LabelWriter:
    """Print labels on a DYMO LabelWriter.

    Without an interface in the config the printer is autodetected on the
    first print, and the detected printer is kept for later prints.

    Calls on one instance must not overlap; use one instance per concurrent
    job.
    """

    def __init__(
        self,
        config: PrinterConfig | Mapping[str, Any] | None = None,
        *,
        runner: CommandRunner = execute,
        system: str | None = None,
    ) -> None:
        self._config = validate_config(config)
        self._runner = runner
        self._system = system

    @property
    def config(self) -> PrinterConfig:
        """The active configuration, resolved once a printer was discovered."""
        return self._config

    async def print(self, image: Image.Image, copies: int = 1) -> None:
        """Print a PIL image.

        The image should be in landscape orientation and match the size of
        one of the label presets.
        """
        bitmap = image_to_bitmap(image)
        await self.print_bitmap(bitmap, copies)

    async def print_bitmap(self, bitmap: Bitmap, copies: int = 1) -> None:
        """Print packed raster rows in portrait orientation.

        Raises:
            InvalidInputError: If the bitmap is empty or copies is not positive.
            PrinterNotFoundError: If no printer is configured or detected.
            LabelWriterError: The transport's error if delivery fails.
        """
        data = encode_bitmap(bitmap, copies)
        config = await self._resolve_config()
        transport = create_transport(config, self._runner)
        logger.info(f"Printing {copies} label(s) via {transport.describe()}")
        await transport.send(data)

    async def list_printers(self) -> list[PrinterDescriptor]:
        """List all printers known to the operating system."""
        return await discovery.list_printers(self._runner, self._system)

    async def _resolve_config(self) -> PrinterConfig:
        if not self._config.is_resolved:
            self._config = await discovery.discover_printer(self._config, self._runner, self._system)
        return self._config
