"""
Domain Layer - Static Data Models

These dataclasses describe the device side of a troubleshooting session:
where to connect and what came back for each command.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConnectionConfig:
    """
    Credentials captured once from the configuration screen.

    Immutable for the rest of the process and handed to every iteration.

    Attributes:
        hostname: Device address (IP or DNS name).
        username: SSH login user.
        password: SSH login password. Never shown in repr().
    """
    hostname: str
    username: str
    password: str = field(repr=False)


@dataclass
class CommandResult:
    """
    Output of a single command, in the order it was submitted.

    Attributes:
        command: The command line exactly as sent (may be empty).
        result: Raw text returned by the device.
    """
    command: str
    result: str
