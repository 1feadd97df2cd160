"""Abstract base class for print job transports."""

from abc import ABC, abstractmethod


class BaseTransport(ABC):
    """Delivers an encoded print job to the printer."""

    @abstractmethod
    async def send(self, data: bytes) -> None:
        """Send a complete print job.

        Args:
            data: Encoded printer command stream.

        Raises:
            LabelWriterError: A transport specific subclass if delivery fails.
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human readable description of the destination."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"
