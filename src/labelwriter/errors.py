"""Exceptions raised by labelwriter."""


class LabelWriterError(Exception):
    """Base class for all labelwriter errors."""

    pass


class InvalidInputError(LabelWriterError, ValueError):
    """Raised when a bitmap or copy count cannot be encoded."""

    pass


class ConfigError(LabelWriterError):
    """Raised for missing or invalid printer configuration."""

    pass


class PrinterNotFoundError(LabelWriterError):
    """Raised when autodetection finds no label printer."""

    pass


class UnsupportedPlatformError(LabelWriterError):
    """Raised when printers cannot be listed on this operating system."""

    pass


class PrinterConnectionError(LabelWriterError, ConnectionError):
    """Raised when the network printer cannot be reached."""

    pass


class PrinterTimeoutError(LabelWriterError, TimeoutError):
    """Raised when the network printer does not complete in time."""

    pass


class SpoolerError(LabelWriterError):
    """Raised when the print spooler or raw-print helper rejects a job."""

    pass


class DeviceWriteError(LabelWriterError, OSError):
    """Raised when writing to a printer device fails."""

    pass


class ProcessError(LabelWriterError):
    """Raised when an external command cannot be launched or exits non-zero."""

    def __init__(self, command: str, returncode: int | None, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Failed to launch {command}"
        else:
            message = f"{command} exited with status {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
