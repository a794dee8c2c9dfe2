from __future__ import annotations

import math
from pathlib import Path
from typing import Callable, Sequence

import pytest
from nltk.tree import Tree

from dialogue_corpus.model import Corpus
from dialogue_corpus.syntax.base import SyntaxParser


class StubParser(SyntaxParser):
    """Synthetic parser: builds a flat tree over the tokens, or fails."""

    def __init__(self, *, succeed: bool = True, score: float = math.nan) -> None:
        self.succeed = succeed
        self.score = score
        self.calls: list[list[str]] = []
        self._tree: Tree | None = None

    def parse(self, tokens: Sequence[str]) -> bool:
        self.calls.append(list(tokens))
        self._tree = Tree("S", [Tree("X", [t]) for t in tokens]) if self.succeed else None
        return self.succeed

    def best_parse(self) -> Tree:
        if self._tree is None:
            raise RuntimeError("No successful parse available")
        return self._tree

    def best_score(self) -> float:
        return self.score


@pytest.fixture
def write_transcript(tmp_path: Path) -> Callable[..., Path]:
    """Write a transcript file into `tmp_path / "transcripts"`."""

    source_dir = tmp_path / "transcripts"
    source_dir.mkdir(exist_ok=True)

    def _write(name: str, lines: list[str]) -> Path:
        path = source_dir / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_corpus() -> Callable[..., Corpus]:
    """Build a corpus from `{dialogue_id: [(speaker, text), ...]}`."""

    def _make(dialogues: dict[str, list[tuple[str, str]]], corpus_id: str = "test") -> Corpus:
        corpus = Corpus(corpus_id)
        for dialogue_id, utterances in dialogues.items():
            dialogue = corpus.add_dialogue(dialogue_id, "QU_Genre")
            turn = None
            for speaker_id, text in utterances:
                speaker = corpus.get_or_create_speaker(speaker_id)
                if turn is None or turn.speaker != speaker:
                    turn = dialogue.add_turn(speaker)
                dialogue.add_sentence(turn, text)
        return corpus

    return _make
