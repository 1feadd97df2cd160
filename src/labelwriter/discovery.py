"""Find printers known to the operating system.

Detection strategy:
- macOS/Linux: ask CUPS for its destinations (``lpstat -e``), then look up each
  destination's description (``lpstat -l -p <id>``) to get a display name.
- Windows: query ``Win32_Printer`` through PowerShell.
The first printer whose name contains "dymo" is taken as the label printer.
"""

import asyncio
import logging
import platform
import re
from collections.abc import Sequence

from labelwriter.errors import LabelWriterError, PrinterNotFoundError, UnsupportedPlatformError
from labelwriter.models.printer import PrinterConfig, PrinterDescriptor, PrinterInterface
from labelwriter.system import CommandRunner, execute

logger = logging.getLogger(__name__)

CUPS_PLATFORMS = {"Darwin", "Linux"}
WINDOWS_PLATFORM = "Windows"
DEFAULT_KEYWORD = "dymo"


def parse_description(status: str) -> str | None:
    """Extract the ``Description:`` value from ``lpstat -l -p`` output."""
    for line in status.splitlines():
        line = line.strip()
        if line.lower().startswith("description:"):
            value = line[len("description:") :].strip()
            if value:
                return value
    return None


def parse_cim_printers(stdout: str) -> list[PrinterDescriptor]:
    """Parse ``Get-CimInstance Win32_Printer`` list output.

    Records are separated by blank lines and hold ``Label : Value`` lines.
    Records without both a DeviceID and a Name are skipped. When a label
    repeats within a record, the first value wins.
    """
    printers = []
    for block in re.split(r"(?:\r?\n){2,}", stdout):
        device_id = ""
        name = ""
        for line in block.strip().splitlines():
            label, sep, value = line.partition(":")
            if not sep:
                continue
            label = label.strip().lower()
            if label == "deviceid" and not device_id:
                device_id = value.strip()
            elif label == "name" and not name:
                name = value.strip()
            if device_id and name:
                break
        if device_id and name:
            printers.append(PrinterDescriptor(device_id=device_id, name=name))
    return printers


async def list_printers_cups(runner: CommandRunner = execute) -> list[PrinterDescriptor]:
    """List CUPS destinations with their descriptions as names."""
    stdout = await runner("lpstat", ["-e"])
    device_ids = [row.strip() for row in stdout.splitlines() if row.strip()]
    printers = [
        PrinterDescriptor(device_id=device_id, name=re.sub(r"_+", " ", device_id).strip())
        for device_id in device_ids
    ]

    # Description lookups are best effort, a failure keeps the fallback name
    results = await asyncio.gather(
        *(runner("lpstat", ["-l", "-p", printer.device_id]) for printer in printers),
        return_exceptions=True,
    )
    for printer, result in zip(printers, results, strict=True):
        if isinstance(result, BaseException):
            logger.debug(f"Description lookup for {printer.device_id} failed: {result}")
            continue
        description = parse_description(result) if result else None
        if description:
            printer.name = description

    return printers


async def list_printers_windows(runner: CommandRunner = execute) -> list[PrinterDescriptor]:
    """List printers installed on Windows."""
    stdout = await runner(
        "Powershell.exe",
        ["-Command", "Get-CimInstance Win32_Printer -Property DeviceID,Name"],
    )
    return parse_cim_printers(stdout)


async def list_printers(runner: CommandRunner = execute, system: str | None = None) -> list[PrinterDescriptor]:
    """List all printers known to the operating system.

    Args:
        runner: Command runner used to query the system.
        system: Platform name as returned by ``platform.system()``. Defaults to
            the current platform.

    Raises:
        UnsupportedPlatformError: If the platform has no known printer listing.
    """
    system = system or platform.system()
    if system == WINDOWS_PLATFORM:
        return await list_printers_windows(runner)
    if system in CUPS_PLATFORMS:
        return await list_printers_cups(runner)
    raise UnsupportedPlatformError(f"Cannot list printers, unsupported operating system: {system}")


def find_label_printer(
    printers: Sequence[PrinterDescriptor],
    keyword: str = DEFAULT_KEYWORD,
) -> PrinterDescriptor | None:
    """Return the first printer whose name contains keyword, ignoring case."""
    keyword = keyword.lower()
    for printer in printers:
        if printer.name and keyword in printer.name.lower():
            return printer
    return None


async def discover_printer(
    config: PrinterConfig,
    runner: CommandRunner = execute,
    system: str | None = None,
) -> PrinterConfig:
    """Autodetect a DYMO printer and return config resolved to use it.

    Raises:
        PrinterNotFoundError: If listing fails or no DYMO printer is installed.
    """
    system = system or platform.system()
    try:
        printers = await list_printers(runner, system)
    except LabelWriterError as e:
        raise PrinterNotFoundError(f"Cannot find DYMO LabelWriter, printer listing failed: {e}") from e

    printer = find_label_printer(printers)
    if printer is None:
        raise PrinterNotFoundError("Cannot find DYMO LabelWriter. Try to configure manually.")

    interface = PrinterInterface.WINDOWS if system == WINDOWS_PLATFORM else PrinterInterface.CUPS
    logger.info(f"Discovered printer {printer.name!r} ({printer.device_id}) via {interface}")
    return config.model_copy(update={"interface": interface, "device_id": printer.device_id})
