"""
Domain Layer - Static Data Models

Connection parameters and per-command results exchanged with the device
transport.
"""

from tac_assistant.domain.models import CommandResult, ConnectionConfig

__all__ = [
    "CommandResult",
    "ConnectionConfig",
]
