"""
Troubleshooting Service - Application Orchestration Layer

This service is the single owner of SessionState. Both front-ends (the
textual UI and the batch loop) go through it, so the question rules and the
way results are folded into the transcript are defined once.

Usage is always the same three steps:
1. build_request() on the owner's event path,
2. await run() off that path,
3. apply_result() back on the owner's event path.
"""

import logging
from typing import Optional

from ..domain.models import ConnectionConfig
from ..execution.engine import IterationEngine
from ..repositories.transcript import TranscriptRepository
from ..schemas.results import CommandOutcome, Diagnosis, Failure, IterationResult
from ..state.models import IterationRequest, SessionState
from .exceptions import SessionClosedError

logger = logging.getLogger(__name__)


class TroubleshootingService:
    def __init__(
        self,
        engine: IterationEngine,
        transcript_repository: TranscriptRepository,
        metadata: str,
    ):
        self.engine = engine
        self.transcript_repo = transcript_repository
        self.metadata = metadata
        self.state = SessionState(transcript=transcript_repository.load())

    def build_request(self, question: str) -> Optional[IterationRequest]:
        """
        Turns the operator's input into an IterationRequest.

        Returns None when there is nothing to ask (empty input before any
        iteration has completed). An empty input afterwards repeats the last
        question verbatim.

        Raises:
            SessionClosedError: a diagnosis has already been produced.
        """
        if self.state.is_terminal:
            raise SessionClosedError("The session already reached a diagnosis.")

        if question == "":
            if self.state.is_first_question:
                return None
            question = self.state.last_question
        else:
            self.state.last_question = question

        return IterationRequest(
            question=question,
            metadata=self.metadata,
            previous_transcript=self.state.transcript,
        )

    async def run(self, config: ConnectionConfig, request: IterationRequest) -> IterationResult:
        return await self.engine.run_iteration(config, request)

    def apply_result(self, result: IterationResult):
        """
        Folds a finished iteration into SessionState.
        """
        if isinstance(result, Diagnosis):
            self.state.record_diagnosis(result.explanation)
            logger.info("Diagnosis recorded; session is now terminal")

        elif isinstance(result, CommandOutcome):
            self.transcript_repo.append(result.transcript_append)
            self.state.append_transcript(result.transcript_append)
            self.state.is_first_question = False

        elif isinstance(result, Failure):
            # Transcript stays byte-identical; the operator may retry.
            logger.warning(f"Iteration failed ({result.error_type}): {result.detail}")
