"""Image helpers for labelwriter."""

from labelwriter.imaging.bitmap import image_to_bitmap
from labelwriter.imaging.text import create_image_with_text, create_label_with_text

__all__ = [
    "create_image_with_text",
    "create_label_with_text",
    "image_to_bitmap",
]
