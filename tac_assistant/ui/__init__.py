"""
UI Layer - Interactive Front-End

FrontEndMachine holds the UI state; TacAssistantApp renders it with textual.
"""

from tac_assistant.ui.state import ConfigField, ConfigForm, FrontEndMachine, UIState

__all__ = [
    "ConfigField",
    "ConfigForm",
    "FrontEndMachine",
    "UIState",
]
