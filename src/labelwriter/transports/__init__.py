"""Print job transports for labelwriter."""

from labelwriter.errors import ConfigError
from labelwriter.models.printer import PrinterConfig, PrinterInterface
from labelwriter.system import CommandRunner, execute
from labelwriter.transports.base import BaseTransport
from labelwriter.transports.cups import CupsTransport
from labelwriter.transports.device import DeviceTransport
from labelwriter.transports.network import NetworkTransport
from labelwriter.transports.windows import WindowsTransport

__all__ = [
    "BaseTransport",
    "CupsTransport",
    "DeviceTransport",
    "NetworkTransport",
    "WindowsTransport",
    "create_transport",
]


def create_transport(config: PrinterConfig, runner: CommandRunner = execute) -> BaseTransport:
    """Factory function to create the transport selected by the config."""
    transport_factories = {
        PrinterInterface.NETWORK: lambda: NetworkTransport(config.host, config.port, config.timeout),
        PrinterInterface.CUPS: lambda: CupsTransport(config.device_id, runner),
        PrinterInterface.WINDOWS: lambda: WindowsTransport(config.device_id, runner, config.raw_print_helper),
        PrinterInterface.DEVICE: lambda: DeviceTransport(config.device),
    }
    if config.interface is None:
        raise ConfigError("No printer interface configured")
    factory = transport_factories.get(config.interface)
    if not factory:
        raise ConfigError(f"Unknown printer interface configured: {config.interface!r}")
    return factory()
