# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Probabilistic context-free grammar parser.

Wraps NLTK's Viterbi parser. Useful with small hand-written grammars, e.g.
for controlled test corpora. The grammar uses NLTK's PCFG notation:

    S -> NP VP [1.0]
    NP -> 'I' [0.5] | 'you' [0.5]
"""

import math
from pathlib import Path
from typing import Sequence

from nltk.grammar import PCFG
from nltk.parse import ViterbiParser
from nltk.tree import Tree

from dialogue_corpus.syntax.base import SyntaxParser


class PcfgParser(SyntaxParser):
    """Viterbi parser over a PCFG. The score is the probability of the best tree."""

    def __init__(self, grammar: PCFG) -> None:
        self.grammar = grammar
        self._parser = ViterbiParser(grammar)
        self._best: Tree | None = None

    @classmethod
    def from_string(cls, text: str) -> PcfgParser:
        return cls(PCFG.fromstring(text))

    @classmethod
    def from_file(cls, path: Path) -> PcfgParser:
        return cls.from_string(path.read_text(encoding="utf-8"))

    def parse(self, tokens: Sequence[str]) -> bool:
        self._best = None
        tokens = list(tokens)
        try:
            self.grammar.check_coverage(tokens)
        except ValueError:
            return False

        self._best = next(iter(self._parser.parse(tokens)), None)
        return self._best is not None

    def best_parse(self) -> Tree:
        if self._best is None:
            raise RuntimeError("No successful parse available")
        return self._best

    def best_score(self) -> float:
        if self._best is None:
            return math.nan
        return float(self._best.prob())
