"""
Response Classification

The backend signals "I know the root cause" by emitting a fixed stop token
followed by its explanation. Every other response is a list of commands,
one per line. Detection lives here only, so the contract can be tested
without caring how the system instruction is worded.
"""

from dataclasses import dataclass, field
from typing import List, Optional

STOP_TOKEN = "VIVACISCO"


@dataclass
class ResponseClassification:
    """
    Attributes:
        explanation: Text after the first stop token, or None when the
            response is a command list.
        commands: Candidate commands (one per line, blanks kept). Empty for
            a diagnosis.
    """
    explanation: Optional[str] = None
    commands: List[str] = field(default_factory=list)

    @property
    def is_diagnosis(self) -> bool:
        return self.explanation is not None


def classify_response(text: str) -> ResponseClassification:
    # The token wins over anything that looks like a command, before or after it.
    if STOP_TOKEN in text:
        _, explanation = text.split(STOP_TOKEN, 1)
        return ResponseClassification(explanation=explanation)

    # Blank lines are deliberately kept; the transport must tolerate them.
    return ResponseClassification(commands=text.split("\n"))
