# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Corpus parsing.

Runs a syntax parser over every sentence of a corpus and stores the best
tree on the sentence. The corpus is modified in place.

Progress is written to stdout (per dialogue) and stderr (per sentence). Long
runs over large corpora depend on it.
"""

import math
import sys
from dataclasses import dataclass
from typing import Protocol

from dialogue_corpus.model import Corpus
from dialogue_corpus.syntax.base import SyntaxParser, UnknownParserError
from dialogue_corpus.syntax.registry import default_parser
from dialogue_corpus.syntax.tokenizer import TreebankTokenizer


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[str]: ...


@dataclass
class ParseStats:
    """
    Counters of a parse run.

    Attributes:
        dialogues:
            Dialogues processed.
        sentences:
            Sentences handed to the parser or skipped for lack of tokens.
        skipped_empty:
            Sentences skipped because they have no tokens.
        parsed:
            Sentences parsed successfully.
        failed:
            Sentences the parser could not parse.
    """

    dialogues: int = 0
    sentences: int = 0
    skipped_empty: int = 0
    parsed: int = 0
    failed: int = 0


class CorpusParser:
    """
    Apply a syntax parser to all sentences of a corpus.

    Attributes:
        parser:
            The parser. If None is given, the default parser is installed
            and a warning is printed.
        tokenizer:
            Used for sentences that carry no pre-tokenized words.
        last_stats:
            Counters of the most recent `parse()` call.
    """

    def __init__(self, parser: SyntaxParser | None = None, tokenizer: Tokenizer | None = None) -> None:
        if parser is None:
            print("WARNING: No parser configured, using default ...", file=sys.stderr)
            parser = default_parser()
        if not isinstance(parser, SyntaxParser):
            raise UnknownParserError(f"Unknown parser class: {type(parser).__name__}")

        self.parser = parser
        self.tokenizer = tokenizer or TreebankTokenizer()
        self.last_stats = ParseStats()

    def parse(self, corpus: Corpus, *, leave_existing: bool = False) -> int:
        """
        Parse a corpus, replacing existing syntax unless `leave_existing`.

        Sentences without tokens are skipped and keep their syntax. Sentences
        the parser fails on have their syntax and score cleared. Parser
        exceptions are not caught.

        Args:
            corpus:
                The corpus to parse (modified in place).
            leave_existing:
                If True, sentences that already have a syntax tree are
                skipped.

        Returns:
            Number of sentences parsed successfully.
        """

        stats = ParseStats()
        self.last_stats = stats
        total = len(corpus.dialogues)

        for dialogue in corpus.dialogues.values():
            stats.dialogues += 1
            print(f"Parsing dialogue {stats.dialogues} of {total}: {dialogue.id}")

            for sentence in dialogue.iter_sentences():
                if leave_existing and sentence.syntax is not None:
                    continue

                words = sentence.tokens
                if words is None:
                    words = self.tokenizer.tokenize(sentence.transcription)

                stats.sentences += 1
                if not words:
                    stats.skipped_empty += 1
                    print(f"No words in sentence {stats.sentences} {sentence.id}, skipping ...", file=sys.stderr)
                    continue

                print(f"Parsing sentence {stats.sentences} {sentence.id} {words} ...", end="", file=sys.stderr)
                if self.parser.parse(words):
                    stats.parsed += 1
                    sentence.syntax = self.parser.best_parse()
                    score = self.parser.best_score()
                    if not math.isnan(score):
                        sentence.syntax_prob = score
                    print(" success!", file=sys.stderr)
                else:
                    stats.failed += 1
                    sentence.syntax = None
                    sentence.syntax_prob = math.nan
                    print(" failed.", file=sys.stderr)

            print(f"Parser done {stats.dialogues} dialogues, {stats.sentences} sentences ...")

        print(f"Finished (parsed {stats.parsed} of {stats.sentences} sentences, {stats.failed} failed)")
        return stats.parsed
