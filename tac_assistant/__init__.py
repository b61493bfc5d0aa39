"""
AI TAC Assistant

An interactive troubleshooting assistant: a reasoning backend proposes
read-only diagnostic commands, they are executed on a live network device,
and their output is fed back until the backend declares a diagnosis.
"""

from tac_assistant.domain import (
    CommandResult,
    ConnectionConfig,
)
from tac_assistant.state import (
    IterationRequest,
    SessionState,
)
from tac_assistant.schemas import (
    CommandOutcome,
    Diagnosis,
    Failure,
    IterationResult,
)
from tac_assistant.execution import STOP_TOKEN, IterationEngine, classify_response

__all__ = [
    # Domain Layer
    "CommandResult",
    "ConnectionConfig",
    # State Layer
    "IterationRequest",
    "SessionState",
    # Schemas
    "CommandOutcome",
    "Diagnosis",
    "Failure",
    "IterationResult",
    # Execution Layer
    "IterationEngine",
    "STOP_TOKEN",
    "classify_response",
]
