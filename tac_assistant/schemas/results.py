"""
Schemas - Iteration Result Models

An iteration ends in exactly one of three ways. The 'kind' field is the
discriminator so results can be matched on type or dumped as JSON.
"""
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field


class Diagnosis(BaseModel):
    """
    Terminal outcome: the backend emitted the stop token.
    """
    kind: Literal["diagnosis"] = "diagnosis"
    explanation: str = Field(
        ...,
        description="Raw text after the first stop token, leading whitespace preserved."
    )
    rendered_text: str = Field(
        ...,
        description="The explanation rendered for terminal display."
    )


class CommandOutcome(BaseModel):
    """
    The backend proposed commands and they were executed on the device.
    """
    kind: Literal["commands"] = "commands"
    commands: List[str] = Field(default_factory=list)
    rendered_text: str = Field(
        ...,
        description="Command echo and results rendered for terminal display."
    )
    transcript_append: str = Field(
        ...,
        description="Exact text the caller appends to the session transcript."
    )


class Failure(BaseModel):
    """
    The iteration stopped on an error. Nothing is appended to the transcript.
    """
    kind: Literal["failure"] = "failure"
    error_type: str
    detail: str


IterationResult = Annotated[
    Union[Diagnosis, CommandOutcome, Failure],
    Field(discriminator="kind"),
]
