"""CLI entry point for the AI TAC assistant."""

import asyncio
import logging
import sys
from typing import Optional

import click
from rich.console import Console

from ..config import settings
from ..domain.models import ConnectionConfig
from .batch import run_batch
from .dependencies import get_batch_service, get_interactive_service


def setup_logging(verbose=False, debug=False, log_file: Optional[str] = None):
    """Configure logging. The TUI passes a file so records never draw over the screen."""
    if debug:
        level, fmt = logging.DEBUG, "%(asctime)s %(name)s: %(message)s"
    elif verbose:
        level, fmt = logging.INFO, "%(asctime)s %(message)s"
    else:
        level, fmt = logging.WARNING, "%(levelname)s: %(message)s"
    if log_file:
        logging.basicConfig(level=level, format=fmt, filename=log_file)
    else:
        logging.basicConfig(level=level, format=fmt, stream=sys.stderr)
    logging.getLogger("tac_assistant").setLevel(level)


@click.group(invoke_without_command=True)
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    """AI TAC assistant - LLM-driven troubleshooting of network devices."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Log iteration details")
@click.option("--debug", is_flag=True, help="Log debug details")
@click.option(
    "--log-file",
    default=settings.LOG_FILE,
    show_default=True,
    help="Where the full-screen UI writes its log",
)
def tui(verbose=False, debug=False, log_file=settings.LOG_FILE):
    """Start the interactive full-screen assistant."""
    setup_logging(verbose=verbose, debug=debug, log_file=log_file)

    from ..ui.app import TacAssistantApp
    from ..ui.state import FrontEndMachine

    app = TacAssistantApp(FrontEndMachine(get_interactive_service()))
    try:
        app.run()
    except Exception as e:
        logging.getLogger(__name__).exception("UI failed")
        click.echo(f"Error running program: {e}", err=True)
        sys.exit(1)
    click.echo("Goodbye!")


@cli.command()
@click.option("--question", "-q", required=True, help="Problem description")
@click.option("--host", default=settings.NETWORK_HOST, show_default=True, help="Device address")
@click.option("--username", default=settings.NETWORK_USER, show_default=True, help="SSH user")
@click.option("--password", default=settings.NETWORK_PASS, help="SSH password")
@click.option(
    "--transcript-file",
    type=click.Path(dir_okay=False),
    default=settings.TRANSCRIPT_FILE,
    show_default=True,
    help="Transcript carried over between runs",
)
@click.option("--verbose", "-v", is_flag=True, help="Log iteration details")
@click.option("--debug", is_flag=True, help="Log debug details")
def batch(question, host, username, password, transcript_file, verbose, debug):
    """Run the troubleshooting loop on stdout."""
    setup_logging(verbose=verbose, debug=debug)

    config = ConnectionConfig(hostname=host, username=username, password=password)
    service = get_batch_service(transcript_file)
    exit_code = asyncio.run(run_batch(service, config, question, Console()))
    sys.exit(exit_code)
