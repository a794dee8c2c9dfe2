# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Corpus ingestion from transcript files.

Every transcript file in the source directory becomes one dialogue. Each
matching line becomes one sentence; consecutive lines of the same speaker
are grouped into one turn. Lines that do not match are reported and skipped.
"""

import sys
from pathlib import Path

from dialogue_corpus.model import Corpus, Dialogue, DuplicateDialogueError, Turn
from dialogue_corpus.transcripts.base import ReaderError
from dialogue_corpus.transcripts.line_matcher import TranscriptLineMatcher
from dialogue_corpus.transcripts.registry import find_line_reader, read_transcript_lines, supported_suffixes


DEFAULT_GENRE = "QU_Genre"


class CorpusSetupError(RuntimeError):
    """
    Raised when a corpus cannot be built: a dialogue failed to load or the
    corpus failed its sanity check.
    """

    pass


def dialogue_id_from_file_name(file_name: str) -> str:
    """Strip a recognized transcript extension from a file name."""

    path = Path(file_name)
    if path.suffix.lower() in supported_suffixes():
        return path.name[: -len(path.suffix)]
    return path.name


class CorpusBuilder:
    """
    Build a corpus from a directory of transcript files.

    Attributes:
        corpus:
            The corpus being populated.
        source_dir:
            Directory containing the transcript files.
        genre:
            Genre label assigned to every dialogue.
        matcher:
            Line matcher used to recognize transcript lines.
    """

    def __init__(
        self,
        corpus: Corpus,
        source_dir: Path,
        *,
        genre: str = DEFAULT_GENRE,
        matcher: TranscriptLineMatcher | None = None,
    ) -> None:
        self.corpus = corpus
        self.source_dir = source_dir
        self.genre = genre
        self.matcher = matcher or TranscriptLineMatcher()

    def load_dialogue(self, file_name: str) -> bool:
        """
        Load one transcript file into a new dialogue.

        Args:
            file_name:
                Name of the transcript file inside `source_dir`.

        Returns:
            True if the file could be read and the resulting dialogue passes
            its consistency check.
        """

        print(f"Load dialogue {file_name}")
        path = self.source_dir / file_name
        try:
            lines = read_transcript_lines(path)
        except ReaderError as exc:
            print(f"WARNING: Cannot read transcript: {exc}", file=sys.stderr)
            return False

        try:
            dialogue = self.corpus.add_dialogue(dialogue_id_from_file_name(file_name), self.genre)
        except DuplicateDialogueError as exc:
            print(f"WARNING: {exc} (file {file_name})", file=sys.stderr)
            return False

        self._add_lines(dialogue, lines)
        return dialogue.check()

    def _add_lines(self, dialogue: Dialogue, lines: list[str]) -> None:
        turn: Turn | None = None

        for line in lines:
            if not line.strip():
                continue

            match = self.matcher.match_line(line, dialogue.id)
            if match is None:
                print(f"WARNING: Strange line in {dialogue.id}: {line}", file=sys.stderr)
                continue

            speaker = self.corpus.get_or_create_speaker(match.speaker_id)
            if turn is None or turn.speaker != speaker:
                turn = dialogue.add_turn(speaker)

            sentence = dialogue.add_sentence(turn, match.text)
            if match.da_tags:
                for tag in match.da_tags.split(","):
                    tag = tag.strip()
                    if tag:
                        sentence.da_tags.add(tag)
                        turn.da_tags.add(tag)

    def transcript_files(self) -> list[str]:
        """
        List the transcript files to load, sorted by name.

        Hidden files and files without a registered reader are skipped.
        """

        names: list[str] = []
        for path in sorted(self.source_dir.iterdir(), key=lambda p: p.name):
            if not path.is_file() or path.name.startswith("."):
                continue
            if find_line_reader(path) is None:
                print(f"Skipping unsupported file: {path.name}")
                continue
            names.append(path.name)
        return names

    def setup_corpus(self) -> Corpus:
        """
        Load all transcript files and check the resulting corpus.

        Returns:
            The populated corpus.

        Raises:
            CorpusSetupError:
                If the source directory is missing or empty, any dialogue fails
                to load, or the corpus fails its sanity check.
        """

        if not self.source_dir.is_dir():
            raise CorpusSetupError(f"Transcript directory not found: {self.source_dir}")

        # Plain transcripts are not sampled by genre.
        self.corpus.genre_counts[self.genre] = sys.maxsize

        names = self.transcript_files()
        if not names:
            raise CorpusSetupError(f"No transcript files found in: {self.source_dir}")

        for name in names:
            if not self.load_dialogue(name):
                raise CorpusSetupError(f"Failed to load dialogue from: {self.source_dir / name}")

        if not self.corpus.sanity_check():
            raise CorpusSetupError(f"Corpus '{self.corpus.id}' failed sanity check")

        print(
            f"Loaded {len(self.corpus.dialogues)} dialogue(s), {self.corpus.num_sentences()} sentence(s), "
            f"{len(self.corpus.speakers)} speaker(s)"
        )
        return self.corpus
