"""Tests for the labelwriter command line."""

from unittest.mock import AsyncMock

import pytest
from PIL import Image

from labelwriter import __main__ as cli
from labelwriter.errors import PrinterNotFoundError
from labelwriter.models.printer import PrinterDescriptor, PrinterInterface


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point the CLI at an empty config file."""
    monkeypatch.setattr(cli.settings, "config_file", tmp_path / "missing.yaml")


class TestMain:
    """Tests for main()."""

    def test_labels(self, capsys):
        assert cli.main(["labels"]) == 0

        out = capsys.readouterr().out
        assert "89mm x 28mm: 964 x 300 px" in out
        assert "54mm x 25mm: 584 x 270 px" in out

    def test_list(self, monkeypatch, capsys):
        printers = [PrinterDescriptor(device_id="DYMO_LabelWriter_450", name="DYMO LabelWriter 450")]
        monkeypatch.setattr(cli.LabelWriter, "list_printers", AsyncMock(return_value=printers))

        assert cli.main(["list"]) == 0

        assert "DYMO_LabelWriter_450\tDYMO LabelWriter 450" in capsys.readouterr().out

    def test_print_image_to_device(self, tmp_path):
        image_path = tmp_path / "label.png"
        Image.new("1", (16, 8), color=0).save(image_path)
        device = tmp_path / "lp0"

        result = cli.main(["--interface", "device", "--device", str(device), "print", str(image_path), "-n", "2"])

        assert result == 0
        data = device.read_bytes()
        assert data.count(b"\x1b\x47") == 1
        assert data.endswith(b"\x1b\x45")

    def test_text_label(self, monkeypatch):
        print_mock = AsyncMock()
        monkeypatch.setattr(cli.LabelWriter, "print", print_mock)

        args = ["--interface", "CUPS", "--device-id", "DYMO", "text", "Hello\\nWorld", "--label", "54mm x 25mm"]

        result = cli.main(args)

        assert result == 0
        image, copies = print_mock.await_args.args
        assert image.size == (584, 270)
        assert copies == 1

    def test_missing_image(self, tmp_path, capsys):
        result = cli.main(["--interface", "CUPS", "--device-id", "DYMO", "print", str(tmp_path / "missing.png")])

        assert result == 1
        assert "Cannot read image" in capsys.readouterr().err

    def test_printer_error_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr(
            cli.LabelWriter, "print", AsyncMock(side_effect=PrinterNotFoundError("Cannot find DYMO LabelWriter."))
        )

        result = cli.main(["text", "Hello"])

        assert result == 1
        assert "Cannot find DYMO LabelWriter" in capsys.readouterr().err

    def test_invalid_interface_rejected(self):
        with pytest.raises(SystemExit):
            cli.main(["--interface", "BOGUS", "labels"])


class TestApplyOverrides:
    """Tests for command line overrides."""

    def test_overrides(self):
        args = cli._build_parser().parse_args(["--interface", "network", "--host", "10.0.0.5", "labels"])

        config = cli._apply_overrides(cli.PrinterConfig(), args)

        assert config.interface == PrinterInterface.NETWORK
        assert config.host == "10.0.0.5"
        assert config.port == 9100
