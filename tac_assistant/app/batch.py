"""
Batch (non-interactive) variant of the troubleshooting loop.

Runs the same iteration protocol as the UI, printing to stdout and asking
on plain text whether to keep going. The transcript is kept in a file so a
later invocation continues with the same context.
"""

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from ..domain.models import ConnectionConfig
from ..schemas.results import Diagnosis, Failure
from ..services.troubleshooting import TroubleshootingService

logger = logging.getLogger(__name__)

CONTINUE_PROMPT = "Do you want to continue troubleshooting? (y/n): "


async def run_batch(
    service: TroubleshootingService,
    config: ConnectionConfig,
    question: str,
    console: Console,
    ask: Optional[Callable[[str], str]] = None,
) -> int:
    """
    Loops until a diagnosis, a failure, or the operator declines to continue.

    Returns the process exit code.
    """
    ask = ask or console.input

    while True:
        request = service.build_request(question)
        if request is None:
            console.print("[red]Error:[/red] a question is required.")
            return 1

        with console.status("Processing..."):
            result = await service.run(config, request)
        service.apply_result(result)

        if isinstance(result, Diagnosis):
            console.clear()
            console.print(Text.from_ansi(result.rendered_text))
            return 0

        if isinstance(result, Failure):
            console.print(f"[red]Error:[/red] {result.detail}")
            return 1

        console.print(Text.from_ansi(result.rendered_text))

        response = ask(CONTINUE_PROMPT)
        if response.strip().lower() != "y":
            logger.info("Operator stopped the batch loop")
            return 0
