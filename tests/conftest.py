"""
Shared fixtures: fake reasoning backend and fake device transport.

Settings are read at import time, so the environment is prepared before any
tac_assistant module is imported.
"""

import os

os.environ.setdefault("OPENAI_API_KEY", "test-key")

import asyncio  # noqa: E402
from typing import Callable, List, Optional, Sequence  # noqa: E402

import pytest  # noqa: E402

from tac_assistant.domain.models import CommandResult, ConnectionConfig  # noqa: E402
from tac_assistant.execution.engine import IterationEngine  # noqa: E402
from tac_assistant.llm.interface import LLMProvider  # noqa: E402
from tac_assistant.repositories.transcript import InMemoryTranscriptRepository  # noqa: E402
from tac_assistant.services.exceptions import (  # noqa: E402
    CommandExecutionError,
    DeviceConnectionError,
)
from tac_assistant.services.troubleshooting import TroubleshootingService  # noqa: E402
from tac_assistant.transport.interface import DeviceTransport  # noqa: E402

METADATA = '{"router_type": "Cisco XRv 9000", "Virtual": true}'


class FakeLLMProvider(LLMProvider):
    """Returns queued responses in order; an Exception in the queue is raised."""

    def __init__(self, responses: Optional[list] = None, delay: float = 0.0):
        self.responses = list(responses or [])
        self.calls: List[List[dict]] = []
        self.delay = delay

    async def generate_text(self, messages, temperature=0.0):
        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeTransport(DeviceTransport):
    def __init__(
        self,
        config: ConnectionConfig,
        responder: Callable[[str], str],
        fail_on_open: bool = False,
        fail_on_send: bool = False,
    ):
        self.config = config
        self.responder = responder
        self.fail_on_open = fail_on_open
        self.fail_on_send = fail_on_send
        self.opened = False
        self.close_calls = 0
        self.sent: List[str] = []

    def open(self):
        if self.fail_on_open:
            raise DeviceConnectionError(f"Authentication failed for {self.config.hostname}")
        self.opened = True

    def send_commands(self, commands: Sequence[str]):
        self.sent.extend(commands)
        if self.fail_on_send:
            raise CommandExecutionError("Channel closed while sending")
        return [CommandResult(command=c, result=self.responder(c)) for c in commands]

    def close(self):
        self.close_calls += 1
        self.opened = False


class FakeTransportFactory:
    """Callable transport factory that remembers every transport it built."""

    def __init__(self, responder: Optional[Callable[[str], str]] = None, **failures):
        self.responder = responder or (lambda command: f"<{command}>")
        self.failures = failures
        self.transports: List[FakeTransport] = []

    def __call__(self, config: ConnectionConfig) -> FakeTransport:
        transport = FakeTransport(config, self.responder, **self.failures)
        self.transports.append(transport)
        return transport


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(hostname="172.20.20.3", username="clab", password="clab@123")


@pytest.fixture
def llm() -> FakeLLMProvider:
    return FakeLLMProvider()


@pytest.fixture
def transport_factory() -> FakeTransportFactory:
    return FakeTransportFactory()


@pytest.fixture
def engine(llm, transport_factory) -> IterationEngine:
    return IterationEngine(llm_provider=llm, transport_factory=transport_factory)


@pytest.fixture
def service(engine) -> TroubleshootingService:
    return TroubleshootingService(
        engine=engine,
        transcript_repository=InMemoryTranscriptRepository(),
        metadata=METADATA,
    )
