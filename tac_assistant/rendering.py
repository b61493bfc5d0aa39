"""
Markdown rendering for terminal display.

Backend explanations and command transcripts are markdown. They are turned
into ANSI-styled text with rich so both the textual UI and the batch loop
show the same output.
"""

import logging

from rich.console import Console
from rich.errors import MarkupError
from rich.markdown import Markdown

from .config import settings
from .services.exceptions import RenderError

logger = logging.getLogger(__name__)

EXPLANATION_HEADING = "# AI TAC EXPLANATION\n"


def render_markdown(text: str, width: int = settings.RENDER_WIDTH) -> str:
    """
    Render markdown to an ANSI string.

    Raises:
        RenderError: rich could not render the text.
    """
    console = Console(
        width=width,
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
    )
    try:
        with console.capture() as capture:
            console.print(Markdown(text, code_theme="monokai"))
    except (MarkupError, ValueError, TypeError) as e:
        raise RenderError(f"Failed to render markdown: {e}") from e
    return capture.get()


def render_or_plain(text: str, width: int = settings.RENDER_WIDTH) -> str:
    """Render markdown, falling back to the unrendered text on RenderError."""
    try:
        return render_markdown(text, width=width)
    except RenderError as e:
        logger.warning(f"{e}; showing plain text instead")
        return text


def render_explanation(explanation: str, width: int = settings.RENDER_WIDTH) -> str:
    return render_or_plain(EXPLANATION_HEADING + explanation, width=width)
