"""
State Layer - Runtime Data Models

SessionState is the accumulated context of one troubleshooting session.
The transcript is strictly additive: it is resent to the reasoning backend
on every call, so nothing is ever removed or rewritten.
"""

from typing import Optional
from pydantic import BaseModel, Field

from ..services.exceptions import DiagnosisAlreadyRecordedError


class IterationRequest(BaseModel):
    """
    Input for one iteration. Built fresh from SessionState, never persisted.

    Serialises to the backend payload {question, metadata, previous_data}.
    """
    question: str
    metadata: str
    previous_transcript: str = Field("", serialization_alias="previous_data")

    def to_payload(self) -> str:
        return self.model_dump_json(by_alias=True)


class SessionState(BaseModel):
    """
    The global state for a single troubleshooting session.

    Note: the transcript has no size bound and grows for as long as the
    session runs.
    """
    transcript: str = ""
    last_question: str = ""
    diagnosis_text: Optional[str] = None
    is_first_question: bool = True

    @property
    def is_terminal(self) -> bool:
        return self.diagnosis_text is not None

    def append_transcript(self, text: str) -> None:
        self.transcript += text

    def record_diagnosis(self, text: str) -> None:
        if self.diagnosis_text is not None:
            raise DiagnosisAlreadyRecordedError(
                "A diagnosis has already been recorded for this session."
            )
        self.diagnosis_text = text
