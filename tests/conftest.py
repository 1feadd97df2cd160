"""Pytest configuration and fixtures."""

from collections.abc import Sequence

import pytest

from labelwriter.errors import ProcessError


class FakeRunner:
    """Command runner that records calls and replays canned output.

    ``responses`` maps a command line (command plus arguments joined by
    spaces) to either stdout text or an exception to raise.
    """

    def __init__(self, responses: dict[str, str | Exception] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[tuple[str, list[str], bytes | None]] = []

    async def __call__(self, command: str, args: Sequence[str] = (), stdin: bytes | None = None) -> str:
        self.calls.append((command, list(args), stdin))
        key = " ".join([command, *args])
        response = self.responses.get(key, "")
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def commands(self) -> list[str]:
        return [" ".join([command, *args]) for command, args, _stdin in self.calls]


@pytest.fixture
def runner() -> FakeRunner:
    """Create an empty fake command runner."""
    return FakeRunner()


@pytest.fixture
def failing_process() -> ProcessError:
    """A non-zero exit from an external command."""
    return ProcessError("lp", 1, "lp: The printer or class does not exist.")


@pytest.fixture
def bitmap() -> list[bytes]:
    """A 3 line bitmap with 2 bytes per line."""
    return [b"\xff\x00", b"\x0f\xf0", b"\x00\xff"]


@pytest.fixture
def make_runner():
    """Factory for fake command runners with canned responses."""
    return FakeRunner
