"""Render simple text labels."""

from PIL import Image, ImageDraw, ImageFont

from labelwriter.models.label import LabelSpec


def create_image_with_text(
    width: int,
    height: int,
    text: str,
    horizontal_margin: int = 0,
    font_size: int = 48,
) -> Image.Image:
    """Create a white label image with black text.

    Lines are left aligned at ``horizontal_margin`` and the block is centered
    vertically.

    Args:
        width: Image width in pixels (landscape).
        height: Image height in pixels.
        text: Text to draw, newlines start a new line.
        horizontal_margin: Left margin in pixels.
        font_size: Font size in pixels.

    Returns:
        Grayscale PIL image.
    """
    image = Image.new("L", (width, height), color=255)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default(font_size)

    left, top, _right, bottom = draw.multiline_textbbox((0, 0), text, font=font)
    y = (height - (bottom - top)) // 2 - top
    draw.multiline_text((horizontal_margin - left, y), text, fill=0, font=font)
    return image


def create_label_with_text(
    label: LabelSpec,
    text: str,
    horizontal_margin: int = 20,
    font_size: int = 48,
) -> Image.Image:
    """Create a text image sized for a label preset."""
    return create_image_with_text(label.image_width, label.image_height, text, horizontal_margin, font_size)
