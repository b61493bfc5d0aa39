"""
Engine - Iteration Protocol

The IterationEngine runs exactly one troubleshooting iteration:
-----------------------------------------------

1. Ask the reasoning backend, sending the question, the device metadata and
    the transcript so far.
2. Classify the response. A stop token means the backend has a diagnosis
    and the iteration ends there, without touching the device.
3. Otherwise every response line is a command. Open a transport session,
    send them all in order and collect one result per command.
4. Build the transcript block (command echo + results) and hand it back in a
    CommandOutcome.

The engine never mutates SessionState. Whoever owns the state applies the
returned result, so an iteration that fails part way leaves no trace.
"""

import asyncio
import logging
from typing import List, Optional

from ..domain.models import CommandResult, ConnectionConfig
from ..llm.interface import LLMProvider
from ..rendering import render_explanation, render_or_plain
from ..schemas.results import CommandOutcome, Diagnosis, Failure, IterationResult
from ..services.exceptions import (
    BackendError,
    CommandExecutionError,
    DeviceConnectionError,
)
from ..state.models import IterationRequest
from ..transport.interface import TransportFactory
from .classifier import STOP_TOKEN, classify_response
from .prompts import Template, render

logger = logging.getLogger(__name__)

COMMANDS_HEADER = "\n# Commands to execute:\n"
RESULTS_HEADER = "\n\n# Results:\n"


def build_transcript_block(response_text: str, results: List[CommandResult]) -> str:
    """Command echo followed by the concatenated per-command output."""
    return (
        COMMANDS_HEADER
        + response_text
        + RESULTS_HEADER
        + "".join(r.result for r in results)
    )


class IterationEngine:
    def __init__(
        self,
        llm_provider: LLMProvider,
        transport_factory: TransportFactory,
        temperature: float = 0.0,
        timeout: Optional[float] = None,
    ):
        self.llm_provider = llm_provider
        self.transport_factory = transport_factory
        self.temperature = temperature
        self.timeout = timeout

    async def run_iteration(
        self, config: ConnectionConfig, request: IterationRequest
    ) -> IterationResult:
        """
        Runs one iteration. Long-running; must be awaited off the UI's event path.

        Every backend or transport error comes back as a Failure instead of
        being raised.
        """
        try:
            if self.timeout is None:
                return await self._run(config, request)
            return await asyncio.wait_for(self._run(config, request), self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"Iteration timed out after {self.timeout}s")
            return Failure(
                error_type="TimeoutError",
                detail=f"Iteration did not finish within {self.timeout} seconds",
            )
        except (BackendError, DeviceConnectionError, CommandExecutionError) as e:
            logger.error(f"Iteration failed: {e}")
            return Failure(error_type=type(e).__name__, detail=str(e))

    # ==========================================================================
    # Protocol Steps
    # ==========================================================================

    async def _run(
        self, config: ConnectionConfig, request: IterationRequest
    ) -> IterationResult:
        # 1. Ask
        response_text = await self._ask_backend(request)

        # 2. Classify (stop token has priority over command execution)
        classification = classify_response(response_text)
        if classification.is_diagnosis:
            logger.info("Backend returned a diagnosis")
            return Diagnosis(
                explanation=classification.explanation,
                rendered_text=render_explanation(classification.explanation),
            )

        # 3. Execute (blocking I/O runs in a worker thread)
        commands = classification.commands
        logger.info(f"Executing {len(commands)} commands on {config.hostname}")
        results = await asyncio.to_thread(self._execute, config, commands)

        # 4. Accumulate
        block = build_transcript_block(response_text, results)
        return CommandOutcome(
            commands=commands,
            rendered_text=render_or_plain(block),
            transcript_append=block,
        )

    async def _ask_backend(self, request: IterationRequest) -> str:
        messages = [
            {"role": "system", "content": self._build_system_prompt()},
            {"role": "user", "content": request.to_payload()},
        ]
        return await self.llm_provider.generate_text(
            messages=messages, temperature=self.temperature
        )

    def _execute(self, config: ConnectionConfig, commands: List[str]) -> List[CommandResult]:
        with self.transport_factory(config) as transport:
            results = transport.send_commands(commands)

        if len(results) != len(commands):
            raise CommandExecutionError(
                f"Expected {len(commands)} results, transport returned {len(results)}"
            )
        return results

    def _build_system_prompt(self) -> str:
        return render(Template.SYSTEM_INSTRUCTION, stop_token=STOP_TOKEN)
