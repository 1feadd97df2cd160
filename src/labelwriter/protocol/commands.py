"""DYMO LabelWriter 450 command set.

Reference: LabelWriter 450 Series Technical Reference Manual.
All dimensions are in printer dots (300 per inch).
"""

import math

from labelwriter.errors import InvalidInputError

ESC = 0x1B

# ESC * : return to power-up condition, clear all buffers
CMD_RESET = bytes([ESC, ord("*")])
# ESC E : feed the last printed label to the tear position
CMD_FULL_FORM_FEED = bytes([ESC, ord("E")])
# ESC G : feed to the print head, used between labels of one job
CMD_SHORT_FORM_FEED = bytes([ESC, ord("G")])
# ESC h : 300x300 dpi text quality, the default high speed mode
CMD_TEXT_SPEED_MODE = bytes([ESC, ord("h")])
# ESC e : strobe time at 100% of the standard duty cycle
CMD_DENSITY_NORMAL = bytes([ESC, ord("e")])
# ESC B 0 : no dot tab offset
CMD_NO_DOT_TAB = bytes([ESC, ord("B"), 0])

# The printer may be waiting for a raster line of up to 84 bytes. A run of ESC
# bytes longer than that forces it to look for a command again.
CMD_START_ESC = bytes([ESC] * 313)

# SYN prefix for one line of raster data
RASTER_LINE_MARKER = 0x16


def set_bytes_per_line(line_width: int) -> bytes:
    """Build ESC D n (Set Bytes per Line).

    Args:
        line_width: Width the print head has to print, in dots.

    Returns:
        Command bytes with n = ceil(line_width / 8).
    """
    line_bytes = math.ceil(line_width / 8)
    if not 0 <= line_bytes <= 0xFF:
        raise InvalidInputError(f"Line width of {line_width} dots does not fit the bytes per line command")
    return bytes([ESC, ord("D"), line_bytes])


def set_label_length(length: int) -> bytes:
    """Build ESC L n1 n2 (Set Label Length).

    The length is the maximum distance the printer travels searching for the
    top-of-form mark. It is sent big-endian; larger values than the printer
    supports are left for the firmware to reject.

    Args:
        length: Label length in dots (number of raster lines).
    """
    if not 0 <= length <= 0xFFFF:
        raise InvalidInputError(f"Label length {length} does not fit in 16 bits")
    msb = (length >> 8) & 0xFF
    lsb = length & 0xFF
    return bytes([ESC, ord("L"), msb, lsb])


def raster_line(row: bytes) -> bytes:
    """Frame one row of packed pixels as a raster line."""
    return bytes([RASTER_LINE_MARKER]) + bytes(row)
