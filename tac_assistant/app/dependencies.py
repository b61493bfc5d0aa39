"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the core Singleton services (LLM Adapter, Engine).
2. Wiring them together (e.g., injecting the LLM Adapter and the transport
   factory into the Engine).
3. Building a TroubleshootingService per front-end, with the transcript
   persistence that front-end needs.

By consolidating construction logic here, the entry points stay focused on
user interaction, and tests can build the same objects with fakes.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from ..config import settings
from ..domain.models import ConnectionConfig
from ..execution.engine import IterationEngine
from ..llm.interface import LLMProvider
from ..llm.adapters.openai_adapter import OpenAIAdapter
from ..repositories.transcript import (
    FileTranscriptRepository,
    InMemoryTranscriptRepository,
    TranscriptRepository,
)
from ..services.troubleshooting import TroubleshootingService
from ..transport.interface import DeviceTransport
from ..transport.adapters.netmiko_adapter import NetmikoTransport


# LLM Provider (Singleton)
@lru_cache()
def get_llm_provider() -> LLMProvider:
    return OpenAIAdapter(
        api_key=settings.OPENAI_API_KEY,
        model_name=settings.OPENAI_MODEL
    )


# Transport Factory: one fresh session per iteration, never reused
def netmiko_transport_factory(config: ConnectionConfig) -> DeviceTransport:
    return NetmikoTransport(config, device_type=settings.DEVICE_PLATFORM)


# The Engine (Singleton Service)
@lru_cache()
def get_iteration_engine() -> IterationEngine:
    return IterationEngine(
        llm_provider=get_llm_provider(),
        transport_factory=netmiko_transport_factory,
        temperature=settings.LLM_TEMPERATURE,
        timeout=settings.ITERATION_TIMEOUT,
    )


def get_troubleshooting_service(
    repository: TranscriptRepository,
    engine: Optional[IterationEngine] = None,
) -> TroubleshootingService:
    return TroubleshootingService(
        engine=engine or get_iteration_engine(),
        transcript_repository=repository,
        metadata=settings.DEVICE_METADATA,
    )


def get_interactive_service() -> TroubleshootingService:
    """Interactive UI: transcript lives for the process only."""
    return get_troubleshooting_service(InMemoryTranscriptRepository())


def get_batch_service(transcript_file: Union[str, Path, None] = None) -> TroubleshootingService:
    """Batch variant: transcript carried over between invocations in a file."""
    return get_troubleshooting_service(
        FileTranscriptRepository(transcript_file or settings.TRANSCRIPT_FILE)
    )
