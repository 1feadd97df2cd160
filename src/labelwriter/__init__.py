"""Print labels on DYMO LabelWriter 450 series printers."""

from labelwriter.errors import (
    ConfigError,
    DeviceWriteError,
    InvalidInputError,
    LabelWriterError,
    PrinterConnectionError,
    PrinterNotFoundError,
    PrinterTimeoutError,
    ProcessError,
    SpoolerError,
    UnsupportedPlatformError,
)
from labelwriter.imaging import create_image_with_text, image_to_bitmap
from labelwriter.models import DYMO_LABELS, LabelSpec, PrinterConfig, PrinterDescriptor, PrinterInterface
from labelwriter.protocol import encode_bitmap
from labelwriter.service import LabelWriter

__all__ = [
    "ConfigError",
    "DYMO_LABELS",
    "DeviceWriteError",
    "InvalidInputError",
    "LabelSpec",
    "LabelWriter",
    "LabelWriterError",
    "PrinterConfig",
    "PrinterConnectionError",
    "PrinterDescriptor",
    "PrinterInterface",
    "PrinterNotFoundError",
    "PrinterTimeoutError",
    "ProcessError",
    "SpoolerError",
    "UnsupportedPlatformError",
    "create_image_with_text",
    "encode_bitmap",
    "image_to_bitmap",
]
