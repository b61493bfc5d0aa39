import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class TranscriptRepository(ABC):
    """
    Defines where the transcript is carried between iterations.
    The interactive UI keeps it in memory; the batch variant keeps it in a
    file so a later invocation picks up where the last one stopped.
    """

    @abstractmethod
    def load(self) -> str:
        """Returns the transcript accumulated so far ('' if none)."""
        pass

    @abstractmethod
    def append(self, text: str):
        """Persists one more transcript block. Never rewrites earlier blocks."""
        pass


class InMemoryTranscriptRepository(TranscriptRepository):
    """
    Keeps blocks in a list for the lifetime of the process.
    """

    def __init__(self):
        self._blocks: List[str] = []

    def load(self) -> str:
        return "".join(self._blocks)

    def append(self, text: str):
        self._blocks.append(text)


class FileTranscriptRepository(TranscriptRepository):
    """
    Appends blocks to a local text file, created on first write.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> str:
        if not self.path.exists():
            return ""
        logger.info(f"Loading previous transcript from {self.path}")
        return self.path.read_text(encoding="utf-8")

    def append(self, text: str):
        with self.path.open("a", encoding="utf-8") as f:
            f.write(text)
