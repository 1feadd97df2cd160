"""Command line interface for labelwriter."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from labelwriter.config import resolve_config, settings
from labelwriter.errors import LabelWriterError
from labelwriter.imaging import create_label_with_text
from labelwriter.models.label import DYMO_LABELS, get_label
from labelwriter.models.printer import PrinterConfig, PrinterInterface
from labelwriter.service import LabelWriter

logger = logging.getLogger("labelwriter")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print labels on a DYMO LabelWriter.",
        prog="labelwriter",
    )
    parser.add_argument(
        "--interface",
        type=str.upper,
        choices=[interface.value for interface in PrinterInterface],
        help="Printer interface (default: config file, then autodetect)",
    )
    parser.add_argument("--host", help="Network printer host name or IP address")
    parser.add_argument("--port", type=int, help="Network printer port")
    parser.add_argument("--device-id", dest="device_id", help="CUPS or Windows printer id")
    parser.add_argument("--device", help="Printer device path, e.g. /dev/usb/lp0")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List printers known to the system")
    subparsers.add_parser("labels", help="List label presets")

    print_parser = subparsers.add_parser("print", help="Print an image file")
    print_parser.add_argument("image", type=Path, help="Image file in landscape orientation")
    print_parser.add_argument("-n", "--copies", type=int, default=1, help="Number of copies (default: 1)")

    text_parser = subparsers.add_parser("text", help="Print a text label")
    text_parser.add_argument("text", help="Label text, use \\n for a line break")
    text_parser.add_argument(
        "--label",
        default="89mm x 28mm",
        choices=list(DYMO_LABELS),
        help="Label preset (default: 89mm x 28mm)",
    )
    text_parser.add_argument("--font-size", type=int, default=48, help="Font size in pixels (default: 48)")
    text_parser.add_argument("-n", "--copies", type=int, default=1, help="Number of copies (default: 1)")

    return parser


def _apply_overrides(config: PrinterConfig, args: argparse.Namespace) -> PrinterConfig:
    overrides = {
        key: getattr(args, key)
        for key in ("interface", "host", "port", "device_id", "device")
        if getattr(args, key) is not None
    }
    return config.model_copy(update=overrides) if overrides else config


async def _run(args: argparse.Namespace) -> int:
    if args.command == "labels":
        for label in DYMO_LABELS.values():
            print(f"{label.title}: {label.image_width} x {label.image_height} px")
        return 0

    config = _apply_overrides(resolve_config(settings), args)
    writer = LabelWriter(config)

    if args.command == "list":
        for printer in await writer.list_printers():
            print(f"{printer.device_id}\t{printer.name}")
        return 0

    if args.command == "print":
        try:
            with Image.open(args.image) as f:
                image = f.copy()
        except (OSError, UnidentifiedImageError) as e:
            print(f"Error: Cannot read image {args.image}: {e}", file=sys.stderr)
            return 1
        await writer.print(image, args.copies)
    elif args.command == "text":
        text = args.text.replace("\\n", "\n")
        image = create_label_with_text(get_label(args.label), text, font_size=args.font_size)
        await writer.print(image, args.copies)

    logger.info(f"Printed via {writer.config.interface} ({writer.config.device_id or writer.config.host})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the labelwriter command line."""
    args = _build_parser().parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if settings.debug or args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return asyncio.run(_run(args))
    except LabelWriterError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
