"""Encode packed bitmaps into a LabelWriter job."""

import logging
from collections.abc import Sequence

from labelwriter.errors import InvalidInputError
from labelwriter.protocol.commands import (
    CMD_DENSITY_NORMAL,
    CMD_FULL_FORM_FEED,
    CMD_NO_DOT_TAB,
    CMD_RESET,
    CMD_SHORT_FORM_FEED,
    CMD_START_ESC,
    CMD_TEXT_SPEED_MODE,
    raster_line,
    set_bytes_per_line,
    set_label_length,
)

logger = logging.getLogger(__name__)

Bitmap = Sequence[bytes]


class CommandBuffer:
    """Ordered byte chunks making up one print job."""

    def __init__(self) -> None:
        self._chunks: list[bytes] = []

    def append(self, chunk: bytes) -> None:
        """Append a chunk to the job.

        Raises:
            TypeError: If chunk is not bytes-like.
        """
        if not isinstance(chunk, bytes | bytearray):
            raise TypeError(f"append() called with type other than bytes: {type(chunk).__name__}")
        self._chunks.append(bytes(chunk))

    def clear(self) -> None:
        """Drop all chunks."""
        self._chunks.clear()

    def getvalue(self) -> bytes:
        """Return the assembled job."""
        return b"".join(self._chunks)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)


def write_header(buffer: CommandBuffer, line_width: int, label_length: int) -> None:
    """Write the resync, reset and label geometry commands.

    Args:
        buffer: Buffer to write to.
        line_width: Print width in dots.
        label_length: Label length in dots.
    """
    buffer.append(CMD_START_ESC)
    buffer.append(CMD_RESET)
    buffer.append(CMD_NO_DOT_TAB)
    buffer.append(set_bytes_per_line(line_width))
    buffer.append(set_label_length(label_length))
    buffer.append(CMD_TEXT_SPEED_MODE)
    buffer.append(CMD_DENSITY_NORMAL)


def encode_bitmap(bitmap: Bitmap, copies: int = 1, *, strict: bool = False) -> bytes:
    """Encode a packed bitmap as a complete print job.

    The label width is taken from the first row and the label length from the
    number of rows. Rows are not compared with each other unless ``strict`` is
    set.

    Args:
        bitmap: Rows of packed pixels in portrait orientation, 1 bit = black.
        copies: Number of labels to print.
        strict: Reject bitmaps whose rows differ in length.

    Returns:
        The printer command stream.

    Raises:
        InvalidInputError: If the bitmap is empty or copies is not positive.
    """
    if not bitmap:
        raise InvalidInputError("Empty bitmap, cannot print")
    if copies <= 0:
        raise InvalidInputError(f"Copies cannot be 0 or a negative number: {copies}")

    row_length = len(bitmap[0])
    if strict:
        for index, row in enumerate(bitmap):
            if len(row) != row_length:
                raise InvalidInputError(f"Row {index} is {len(row)} bytes, expected {row_length}")

    buffer = CommandBuffer()
    write_header(buffer, line_width=row_length * 8, label_length=len(bitmap))

    lines = [raster_line(row) for row in bitmap]
    for count in range(1, copies + 1):
        for line in lines:
            buffer.append(line)
        buffer.append(CMD_FULL_FORM_FEED if count == copies else CMD_SHORT_FORM_FEED)

    data = buffer.getvalue()
    logger.debug(f"Encoded {len(bitmap)} lines x {row_length} bytes, {copies} copies: {len(data)} bytes")
    return data
