"""
Transport Layer - Device Command Execution

Defines the DeviceTransport contract used by the IterationEngine and the
netmiko-backed implementation that talks to real devices over SSH.
"""

from tac_assistant.transport.interface import DeviceTransport, TransportFactory

__all__ = [
    "DeviceTransport",
    "TransportFactory",
]
