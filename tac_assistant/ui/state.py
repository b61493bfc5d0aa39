"""
Front-End State Machine

Holds only UI state: which screen is active, which configuration field has
focus, what the result region shows and whether an iteration is in flight.
It performs no I/O; the textual app feeds it key events and iteration
results and redraws from it.

States:
- CONFIGURING: collect hostname / username / password.
- TROUBLESHOOTING: ask questions, show results. Becomes read-only once a
  diagnosis arrives. There is no way back to CONFIGURING.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ..config import settings
from ..domain.models import ConnectionConfig
from ..schemas.results import CommandOutcome, Diagnosis, Failure, IterationResult
from ..services.troubleshooting import TroubleshootingService
from ..state.models import IterationRequest

logger = logging.getLogger(__name__)

QUESTION_PLACEHOLDER = "Enter your network troubleshooting question..."
CONTINUE_PLACEHOLDER = "Press Enter to continue troubleshooting..."
EXIT_HINT = "\n\nPress 'q' to exit"


class UIState(Enum):
    CONFIGURING = auto()
    TROUBLESHOOTING = auto()


@dataclass
class ConfigField:
    name: str
    placeholder: str
    value: str = ""
    masked: bool = False


def default_config_fields() -> List[ConfigField]:
    """The three connection fields, pre-populated from the environment."""
    return [
        ConfigField(
            name="hostname",
            placeholder="Enter hostname (e.g., 172.20.20.3)",
            value=settings.NETWORK_HOST,
        ),
        ConfigField(
            name="username",
            placeholder="Enter username (e.g., clab)",
            value=settings.NETWORK_USER,
        ),
        ConfigField(
            name="password",
            placeholder="Enter password",
            value=settings.NETWORK_PASS,
            masked=True,
        ),
    ]


class ConfigForm:
    """
    Ordered list of fields with cyclic focus (wraps in both directions).
    """

    def __init__(self, fields: List[ConfigField]):
        if not fields:
            raise ValueError("ConfigForm needs at least one field.")
        self.fields = fields
        self.focus_index = 0

    @property
    def on_last_field(self) -> bool:
        return self.focus_index == len(self.fields) - 1

    def focus_next(self) -> int:
        self.focus_index = (self.focus_index + 1) % len(self.fields)
        return self.focus_index

    def focus_previous(self) -> int:
        self.focus_index = (self.focus_index - 1) % len(self.fields)
        return self.focus_index

    def set_value(self, name: str, value: str):
        for f in self.fields:
            if f.name == name:
                f.value = value
                return
        raise KeyError(name)

    def to_config(self) -> ConnectionConfig:
        values = {f.name: f.value for f in self.fields}
        return ConnectionConfig(
            hostname=values["hostname"],
            username=values["username"],
            password=values["password"],
        )


class FrontEndMachine:
    def __init__(
        self,
        service: TroubleshootingService,
        fields: Optional[List[ConfigField]] = None,
    ):
        self.service = service
        self.form = ConfigForm(fields if fields is not None else default_config_fields())

        self.state = UIState.CONFIGURING
        self.config: Optional[ConnectionConfig] = None

        # Troubleshooting view
        self.busy = False
        self.output = ""
        self.error: Optional[str] = None
        self.placeholder = QUESTION_PLACEHOLDER

    # ==========================================================================
    # Configuring
    # ==========================================================================

    def confirm_field(self) -> bool:
        """
        Enter on a configuration field. Advances focus, or on the last field
        commits the ConnectionConfig and switches to TROUBLESHOOTING.

        Returns True when the configuration was committed.
        """
        if self.state != UIState.CONFIGURING:
            return False

        if not self.form.on_last_field:
            self.form.focus_next()
            return False

        self.config = self.form.to_config()
        self.state = UIState.TROUBLESHOOTING
        logger.info(f"Configuration committed for {self.config.hostname}")
        return True

    # ==========================================================================
    # Troubleshooting
    # ==========================================================================

    @property
    def is_terminal(self) -> bool:
        return self.service.state.is_terminal

    @property
    def accepts_questions(self) -> bool:
        return (
            self.state == UIState.TROUBLESHOOTING
            and not self.busy
            and not self.is_terminal
        )

    def submit(self, question: str) -> Optional[IterationRequest]:
        """
        Enter on the question field. Returns the request to dispatch, or None
        when the submission is ignored (busy, terminal, or nothing to ask).
        """
        if not self.accepts_questions:
            return None

        request = self.service.build_request(question)
        if request is None:
            return None

        self.busy = True
        self.error = None
        return request

    def resolve(self, result: IterationResult):
        """
        The only place an iteration result changes session or view state.
        """
        self.busy = False
        self.service.apply_result(result)

        if isinstance(result, Diagnosis):
            # Replace, never append.
            self.output = result.rendered_text + EXIT_HINT

        elif isinstance(result, CommandOutcome):
            self.output += result.rendered_text
            self.placeholder = CONTINUE_PLACEHOLDER

        elif isinstance(result, Failure):
            self.error = result.detail

    @property
    def status_text(self) -> str:
        if self.error is not None:
            return f"Error: {self.error}"
        if self.busy:
            return "Processing..."
        if self.is_terminal:
            return "Issue found! Press 'q' to exit"
        if self.service.state.is_first_question:
            return "Enter your troubleshooting question and press Enter"
        return "Press Enter to continue troubleshooting"
