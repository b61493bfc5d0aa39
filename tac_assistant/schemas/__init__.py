"""
Schemas - Iteration Result Models

Defines the tagged result of one iteration, consumed by the front-end and
the batch loop to update SessionState and the view.
"""

from tac_assistant.schemas.results import (
    CommandOutcome,
    Diagnosis,
    Failure,
    IterationResult,
)

__all__ = [
    "CommandOutcome",
    "Diagnosis",
    "Failure",
    "IterationResult",
]
