"""
Execution Layer - Iteration Protocol

Defines the IterationEngine (one ask -> classify -> execute cycle) and the
stop-token classification it relies on.
"""

from tac_assistant.execution.classifier import STOP_TOKEN, classify_response
from tac_assistant.execution.engine import IterationEngine


__all__ = [
    "IterationEngine",
    "STOP_TOKEN",
    "classify_response",
]
