# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript line reader interface."""

from pathlib import Path
from typing import Protocol


class LineReader(Protocol):
    """Interface for transcript file reading.

    Implementations must only perform raw text extraction. Recognizing
    speakers and utterances is the job of the line matcher.
    """

    suffixes: frozenset[str]

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_lines(self, path: Path) -> list[str]:
        """Return the transcript lines of the given file, in order."""

        raise NotImplementedError


class ReaderError(RuntimeError):
    """Raised when a transcript file cannot be read."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message
