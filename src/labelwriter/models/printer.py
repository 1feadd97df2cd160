"""Printer configuration models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class PrinterInterface(StrEnum):
    """Supported delivery interfaces."""

    NETWORK = "NETWORK"
    CUPS = "CUPS"
    WINDOWS = "WINDOWS"
    DEVICE = "DEVICE"


class PrinterConfig(BaseModel):
    """Configuration for a single label printer.

    An unset ``interface`` means the printer is autodetected on first use.
    """

    model_config = ConfigDict(frozen=True)

    interface: PrinterInterface | None = None
    host: str = "localhost"
    port: int = 9100
    device_id: str | None = None  # CUPS destination or Windows printer name
    device: str | None = None  # e.g. /dev/usb/lp0
    timeout: float = 30.0  # Network connect/activity timeout in seconds
    raw_print_helper: str = "RP.exe"

    @property
    def is_resolved(self) -> bool:
        """Check if a delivery interface has been chosen."""
        return self.interface is not None


class PrinterDescriptor(BaseModel):
    """A printer known to the operating system."""

    device_id: str
    name: str
