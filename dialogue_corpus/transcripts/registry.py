# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript reader registry."""

from pathlib import Path

from dialogue_corpus.transcripts.base import LineReader, ReaderError
from dialogue_corpus.transcripts.odt_reader import OdtLineReader
from dialogue_corpus.transcripts.text_reader import TextLineReader


_READERS: list[LineReader] = [
    OdtLineReader(),
    TextLineReader(),
]


def supported_suffixes() -> set[str]:
    """Return all file extensions (lowercase, with dot) a reader exists for."""

    return {s for r in _READERS for s in r.suffixes}


def find_line_reader(path: Path) -> LineReader | None:
    """Select a transcript reader based on the file, or None if unsupported."""

    for reader in _READERS:
        if reader.can_read(path):
            return reader
    return None


def read_transcript_lines(path: Path) -> list[str]:
    """
    Read a transcript file as an ordered list of lines.

    Args:
        path:
            Transcript file path.

    Returns:
        The file's lines.

    Raises:
        ReaderError:
            If no reader supports the file or the file cannot be read.
    """

    reader = find_line_reader(path)
    if reader is None:
        supported = ", ".join(sorted(supported_suffixes()))
        raise ReaderError(f"Unsupported transcript format (supported: {supported})", path=path)
    return reader.read_lines(path)
