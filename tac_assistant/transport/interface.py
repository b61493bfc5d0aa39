from abc import ABC, abstractmethod
from typing import Callable, List, Sequence

from ..domain.models import CommandResult, ConnectionConfig


class DeviceTransport(ABC):
    """
    A scoped, authenticated session to one device.

    Use it as a context manager: the session is opened on entry and always
    closed on exit, whether or not sending commands succeeded.
    """

    @abstractmethod
    def open(self) -> None:
        """
        Raises:
            DeviceConnectionError: the session could not be established.
        """
        pass

    @abstractmethod
    def send_commands(self, commands: Sequence[str]) -> List[CommandResult]:
        """
        Runs every command in order and returns one CommandResult per command,
        in the same order. Empty commands are sent as-is.

        Raises:
            CommandExecutionError: the session failed while sending.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Idempotent. Safe to call after a failed open()."""
        pass

    def __enter__(self) -> "DeviceTransport":
        try:
            self.open()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# Builds a fresh, unopened transport for one iteration.
TransportFactory = Callable[[ConnectionConfig], DeviceTransport]
