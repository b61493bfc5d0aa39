import logging
from typing import List, Optional, Sequence

from netmiko import BaseConnection, ConnectHandler
from netmiko.exceptions import (
    NetmikoAuthenticationException,
    NetmikoBaseException,
    NetmikoTimeoutException,
)
from paramiko import SSHException

from ..interface import DeviceTransport
from ...config import settings
from ...domain.models import CommandResult, ConnectionConfig
from ...services.exceptions import CommandExecutionError, DeviceConnectionError

logger = logging.getLogger(__name__)


class NetmikoTransport(DeviceTransport):
    """
    SSH transport backed by netmiko. Host-key checking is disabled.
    """

    def __init__(self, config: ConnectionConfig, device_type: str = settings.DEVICE_PLATFORM):
        self.config = config
        self.device_type = device_type
        self._conn: Optional[BaseConnection] = None

    def open(self) -> None:
        logger.info(f"Opening {self.device_type} session to {self.config.hostname}")
        try:
            self._conn = ConnectHandler(
                device_type=self.device_type,
                host=self.config.hostname,
                username=self.config.username,
                password=self.config.password,
                ssh_strict=False,
                system_host_keys=False,
            )
        except (
            NetmikoAuthenticationException,
            NetmikoTimeoutException,
            SSHException,
            OSError,
            ValueError,
        ) as e:
            # ValueError: unsupported device_type
            raise DeviceConnectionError(
                f"Failed to open session to {self.config.hostname}: {e}"
            ) from e

    def send_commands(self, commands: Sequence[str]) -> List[CommandResult]:
        if self._conn is None:
            raise CommandExecutionError("Transport session is not open.")

        results = []
        for command in commands:
            try:
                output = self._conn.send_command(command)
            except (
                NetmikoBaseException,
                NetmikoTimeoutException,
                SSHException,
                OSError,
                EOFError,
            ) as e:
                raise CommandExecutionError(
                    f"Failed to send command '{command}': {e}"
                ) from e
            results.append(CommandResult(command=command, result=output))

        logger.debug(f"Collected {len(results)} results from {self.config.hostname}")
        return results

    def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            conn.disconnect()
        except (NetmikoBaseException, SSHException, OSError, EOFError) as e:
            logger.warning(f"Error while closing session to {self.config.hostname}: {e}")
