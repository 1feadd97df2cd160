"""LabelWriter command protocol."""

from labelwriter.protocol.commands import (
    CMD_DENSITY_NORMAL,
    CMD_FULL_FORM_FEED,
    CMD_NO_DOT_TAB,
    CMD_RESET,
    CMD_SHORT_FORM_FEED,
    CMD_START_ESC,
    CMD_TEXT_SPEED_MODE,
    RASTER_LINE_MARKER,
    raster_line,
    set_bytes_per_line,
    set_label_length,
)
from labelwriter.protocol.encoder import Bitmap, CommandBuffer, encode_bitmap

__all__ = [
    "Bitmap",
    "CMD_DENSITY_NORMAL",
    "CMD_FULL_FORM_FEED",
    "CMD_NO_DOT_TAB",
    "CMD_RESET",
    "CMD_SHORT_FORM_FEED",
    "CMD_START_ESC",
    "CMD_TEXT_SPEED_MODE",
    "CommandBuffer",
    "RASTER_LINE_MARKER",
    "encode_bitmap",
    "raster_line",
    "set_bytes_per_line",
    "set_label_length",
]
