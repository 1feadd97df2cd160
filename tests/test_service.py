"""Tests for the LabelWriter service."""

import asyncio
import socket

import pytest
from PIL import Image

from labelwriter import LabelWriter
from labelwriter.errors import (
    ConfigError,
    InvalidInputError,
    PrinterConnectionError,
    PrinterNotFoundError,
)
from labelwriter.models.printer import PrinterConfig, PrinterInterface
from labelwriter.protocol import CMD_FULL_FORM_FEED, CMD_RESET, encode_bitmap

LPSTAT_RESPONSES = {
    "lpstat -e": "Office_Laser\nDYMO_LabelWriter_450\n",
    "lpstat -l -p Office_Laser": "\tDescription: Office Laser\n",
    "lpstat -l -p DYMO_LabelWriter_450": "\tDescription: DYMO LabelWriter 450\n",
}


class TestConstruction:
    """Tests for configuration validation at construction time."""

    def test_no_config(self):
        writer = LabelWriter()

        assert writer.config == PrinterConfig()
        assert writer.config.is_resolved is False

    def test_mapping_config(self):
        writer = LabelWriter({"interface": "NETWORK", "host": "printer.local"})

        assert writer.config.interface == PrinterInterface.NETWORK
        assert writer.config.host == "printer.local"
        assert writer.config.port == 9100

    def test_model_config(self):
        config = PrinterConfig(interface=PrinterInterface.DEVICE, device="/dev/usb/lp0")

        assert LabelWriter(config).config is config

    def test_invalid_interface(self, runner):
        """An unknown interface fails before any command is run."""
        with pytest.raises(ConfigError):
            LabelWriter({"interface": "BOGUS"}, runner=runner)

        assert runner.calls == []

    def test_invalid_port(self):
        with pytest.raises(ConfigError):
            LabelWriter({"interface": "NETWORK", "port": "not-a-port"})


class TestPrintBitmap:
    """Tests for LabelWriter.print_bitmap."""

    async def test_empty_bitmap(self, runner):
        writer = LabelWriter({"interface": "CUPS", "device_id": "DYMO"}, runner=runner)

        with pytest.raises(InvalidInputError):
            await writer.print_bitmap([], 1)

        assert runner.calls == []

    async def test_zero_copies(self, runner, bitmap):
        writer = LabelWriter({"interface": "CUPS", "device_id": "DYMO"}, runner=runner)

        with pytest.raises(InvalidInputError):
            await writer.print_bitmap(bitmap, 0)

        assert runner.calls == []

    async def test_cups(self, runner, bitmap):
        writer = LabelWriter({"interface": "CUPS", "device_id": "DYMO"}, runner=runner)

        await writer.print_bitmap(bitmap, 2)

        assert runner.calls == [("lp", ["-d", "DYMO"], encode_bitmap(bitmap, 2))]

    async def test_device(self, tmp_path, bitmap):
        device = tmp_path / "lp0"
        writer = LabelWriter({"interface": "DEVICE", "device": str(device)})

        await writer.print_bitmap(bitmap)

        assert device.read_bytes() == encode_bitmap(bitmap)

    async def test_device_not_configured(self, bitmap):
        writer = LabelWriter({"interface": "DEVICE"})

        with pytest.raises(ConfigError):
            await writer.print_bitmap(bitmap)

    async def test_network(self, bitmap):
        received = bytearray()
        done = asyncio.Event()

        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            received.extend(await reader.read())
            writer.close()
            done.set()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        async with server:
            writer = LabelWriter({"interface": "NETWORK", "host": "127.0.0.1", "port": port})
            await writer.print_bitmap(bitmap)
            await asyncio.wait_for(done.wait(), timeout=5.0)

        assert bytes(received) == encode_bitmap(bitmap)

    async def test_network_unreachable(self, bitmap):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.bind(("127.0.0.1", 0))
            port = sock.getsockname()[1]
        writer = LabelWriter({"interface": "NETWORK", "host": "127.0.0.1", "port": port, "timeout": 5})

        with pytest.raises(PrinterConnectionError):
            await writer.print_bitmap(bitmap)


class TestAutodetect:
    """Tests for printer autodetection on first print."""

    async def test_discovers_and_remembers(self, make_runner, bitmap):
        runner = make_runner(LPSTAT_RESPONSES)
        writer = LabelWriter(runner=runner, system="Linux")

        await writer.print_bitmap(bitmap)

        assert writer.config.interface == PrinterInterface.CUPS
        assert writer.config.device_id == "DYMO_LabelWriter_450"
        assert runner.calls[-1] == ("lp", ["-d", "DYMO_LabelWriter_450"], encode_bitmap(bitmap))

        # Second print skips discovery
        calls_before = len(runner.calls)
        await writer.print_bitmap(bitmap)

        assert runner.commands[calls_before:] == ["lp -d DYMO_LabelWriter_450"]

    async def test_windows_discovery(self, make_runner, bitmap):
        cim = "DeviceID : DYMO LabelWriter 450\nName : DYMO LabelWriter 450\n"
        runner = make_runner({"Powershell.exe -Command Get-CimInstance Win32_Printer -Property DeviceID,Name": cim})
        writer = LabelWriter(runner=runner, system="Windows")

        await writer.print_bitmap(bitmap)

        assert writer.config.interface == PrinterInterface.WINDOWS
        command, args, _stdin = runner.calls[-1]
        assert command == "RP.exe"
        assert args[0] == "DYMO LabelWriter 450"

    async def test_no_printer_found(self, make_runner, bitmap):
        runner = make_runner({"lpstat -e": "Office_Laser\n"})
        writer = LabelWriter(runner=runner, system="Linux")

        with pytest.raises(PrinterNotFoundError):
            await writer.print_bitmap(bitmap)

        assert writer.config.is_resolved is False
        assert "lp -d Office_Laser" not in runner.commands

    async def test_unsupported_platform(self, runner, bitmap):
        writer = LabelWriter(runner=runner, system="Plan9")

        with pytest.raises(PrinterNotFoundError):
            await writer.print_bitmap(bitmap)

        assert runner.calls == []

    async def test_keeps_other_settings(self, make_runner, bitmap):
        runner = make_runner(LPSTAT_RESPONSES)
        writer = LabelWriter({"host": "unused.local", "timeout": 3}, runner=runner, system="Darwin")

        await writer.print_bitmap(bitmap)

        assert writer.config.host == "unused.local"
        assert writer.config.timeout == 3


class TestPrintImage:
    """Tests for LabelWriter.print."""

    async def test_print_image(self, runner):
        # 16 x 8 landscape image becomes 8 dots wide and 16 lines long
        image = Image.new("1", (16, 8), color=0)
        writer = LabelWriter({"interface": "CUPS", "device_id": "DYMO"}, runner=runner)

        await writer.print(image)

        data = runner.calls[0][2]
        assert data[313:315] == CMD_RESET
        assert b"\x1b\x44\x01" in data
        assert b"\x1b\x4c\x00\x10" in data
        assert data.count(b"\x16\xff") == 16
        assert data.endswith(CMD_FULL_FORM_FEED)


class TestListPrinters:
    """Tests for LabelWriter.list_printers."""

    async def test_list_printers(self, make_runner):
        writer = LabelWriter(runner=make_runner(LPSTAT_RESPONSES), system="Linux")

        printers = await writer.list_printers()

        assert [p.name for p in printers] == ["Office Laser", "DYMO LabelWriter 450"]
