"""Interactive full-screen front-end (textual).

The app renders whatever FrontEndMachine says and forwards key events to it.
Iterations run in a textual worker; their result comes back as an
IterationFinished message and is applied in one handler.
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import ContentSwitcher, Footer, Input, Label, LoadingIndicator, Static

from ..schemas.results import CommandOutcome, Diagnosis, Failure, IterationResult
from ..state.models import IterationRequest
from .state import FrontEndMachine, UIState

logger = logging.getLogger(__name__)


class IterationFinished(Message):
    """Posted by the iteration worker when run_iteration resolves."""

    def __init__(self, result: IterationResult) -> None:
        super().__init__()
        self.result = result


class ConfigPanel(Vertical):
    """Connection form. Tab/arrows cycle the fields with wrap-around."""

    BINDINGS = [
        Binding("tab", "cycle(1)", "Next field", show=False),
        Binding("down", "cycle(1)", "Next field", show=False),
        Binding("shift+tab", "cycle(-1)", "Previous field", show=False),
        Binding("up", "cycle(-1)", "Previous field", show=False),
    ]

    def action_cycle(self, step: int) -> None:
        self.app.cycle_config_focus(step)


class TacAssistantApp(App):
    """Network troubleshooting assistant."""

    TITLE = "Network Troubleshooting Assistant"

    CSS = """
    Screen {
        layout: vertical;
    }

    .title {
        text-style: bold;
        color: #FF75B7;
        margin: 1 2;
    }

    .hint {
        color: #04B575;
        margin: 1 2;
    }

    #config-panel Input {
        margin: 0 2;
    }

    #results {
        height: 1fr;
        border: round #5f5fd7;
        padding: 0 2 0 0;
        margin: 0 1;
    }

    #question {
        margin: 1 1 0 1;
    }

    #status-bar {
        height: 1;
        margin: 0 2;
    }

    #busy {
        width: 6;
        height: 1;
        color: #ff5faf;
    }

    #status {
        color: #04B575;
    }

    #status.error {
        color: #FF0000;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("q", "quit", "Quit (when not typing)"),
    ]

    def __init__(self, machine: FrontEndMachine) -> None:
        super().__init__()
        self.machine = machine

    def compose(self) -> ComposeResult:
        with ContentSwitcher(initial="config-panel"):
            with ConfigPanel(id="config-panel"):
                yield Label("Network Device Configuration", classes="title")
                for field in self.machine.form.fields:
                    yield Input(
                        value=field.value,
                        placeholder=field.placeholder,
                        password=field.masked,
                        max_length=64,
                        id=f"config-{field.name}",
                        classes="config-input",
                    )
                yield Static(
                    "Press Tab to cycle through inputs • Enter to confirm",
                    classes="hint",
                )
            with Vertical(id="troubleshoot-panel"):
                yield Label("Network Troubleshooting Assistant", classes="title")
                with VerticalScroll(id="results"):
                    yield Static(id="output")
                yield Input(
                    placeholder=self.machine.placeholder,
                    max_length=156,
                    id="question",
                )
                with Horizontal(id="status-bar"):
                    yield LoadingIndicator(id="busy")
                    yield Static(id="status")

        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#busy").display = False
        self._config_inputs()[self.machine.form.focus_index].focus()

    # ==========================================================================
    # Configuring
    # ==========================================================================

    def _config_inputs(self) -> list[Input]:
        return list(self.query(".config-input").results(Input))

    def _sync_form_focus(self) -> None:
        inputs = self._config_inputs()
        if self.focused in inputs:
            self.machine.form.focus_index = inputs.index(self.focused)

    def cycle_config_focus(self, step: int) -> None:
        if self.machine.state != UIState.CONFIGURING:
            return
        self._sync_form_focus()
        if step > 0:
            index = self.machine.form.focus_next()
        else:
            index = self.machine.form.focus_previous()
        self._config_inputs()[index].focus()

    @on(Input.Changed, ".config-input")
    def _config_changed(self, event: Input.Changed) -> None:
        name = event.input.id.removeprefix("config-")
        self.machine.form.set_value(name, event.value)

    @on(Input.Submitted, ".config-input")
    def _config_submitted(self, event: Input.Submitted) -> None:
        self._sync_form_focus()
        if self.machine.confirm_field():
            self.query_one(ContentSwitcher).current = "troubleshoot-panel"
            self.query_one("#question", Input).focus()
            self._refresh_view()
        else:
            self._config_inputs()[self.machine.form.focus_index].focus()

    # ==========================================================================
    # Troubleshooting
    # ==========================================================================

    @on(Input.Submitted, "#question")
    def _question_submitted(self, event: Input.Submitted) -> None:
        request = self.machine.submit(event.value)
        if request is None:
            return
        event.input.value = request.question
        self._refresh_view()
        self.run_iteration(request)

    @work(exclusive=True, exit_on_error=False)
    async def run_iteration(self, request: IterationRequest) -> None:
        try:
            result = await self.machine.service.run(self.machine.config, request)
        except Exception as e:
            # Anything the engine did not map still has to reach the UI.
            logger.exception("Unexpected error during iteration")
            result = Failure(error_type=type(e).__name__, detail=str(e))
        self.post_message(IterationFinished(result))

    @on(IterationFinished)
    def _iteration_finished(self, message: IterationFinished) -> None:
        self.machine.resolve(message.result)

        question = self.query_one("#question", Input)
        if isinstance(message.result, CommandOutcome):
            question.clear()
            question.placeholder = self.machine.placeholder

        if self.machine.is_terminal:
            question.disabled = True
            self.query_one("#results").focus()

        self._refresh_view()
        results = self.query_one("#results", VerticalScroll)
        if isinstance(message.result, CommandOutcome):
            results.scroll_end(animate=False)
        elif isinstance(message.result, Diagnosis):
            results.scroll_home(animate=False)

    def _refresh_view(self) -> None:
        self.query_one("#output", Static).update(Text.from_ansi(self.machine.output))
        self.query_one("#busy").display = self.machine.busy

        status = self.query_one("#status", Static)
        status.update(self.machine.status_text)
        status.set_class(self.machine.error is not None, "error")
