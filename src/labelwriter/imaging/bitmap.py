"""Convert PIL images to LabelWriter raster rows."""

from PIL import Image


def image_to_bitmap(image: Image.Image, rotate: bool = True) -> list[bytes]:
    """Convert a PIL image to packed raster rows.

    The print head runs across the short side of the label, so a landscape
    label image is rotated a quarter turn to portrait before packing.

    Args:
        image: PIL Image to convert, in landscape orientation.
        rotate: Rotate the image to portrait first.

    Returns:
        One bytes object per raster line, 1 bit = black dot, MSB first.
    """
    if rotate:
        image = image.rotate(90, expand=True)

    # Convert to 1-bit black and white
    if image.mode != "1":
        image = image.convert("1")

    width, height = image.size

    # Calculate bytes per row (must be byte-aligned)
    bytes_per_row = (width + 7) // 8

    pixels: list[int] = list(image.getdata())  # type: ignore[arg-type]

    rows: list[bytes] = []
    for y in range(height):
        row = bytearray(bytes_per_row)
        offset = y * width
        for x in range(width):
            # PIL: 0 = black, non-zero = white
            if pixels[offset + x] == 0:
                row[x // 8] |= 1 << (7 - x % 8)
        rows.append(bytes(row))
    return rows
