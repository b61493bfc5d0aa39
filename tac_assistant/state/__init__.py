"""
State Layer - Runtime Data Models

Defines the session state that accumulates the troubleshooting transcript
and the per-call request built from it.
"""

from tac_assistant.state.models import (
    IterationRequest,
    SessionState,
)

__all__ = [
    "IterationRequest",
    "SessionState",
]
