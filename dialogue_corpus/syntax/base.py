# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Syntax parser capability."""

import math
from abc import ABC, abstractmethod
from typing import Sequence

from nltk.tree import Tree


class UnknownParserError(RuntimeError):
    """Raised when an object that is not a `SyntaxParser` is configured as parser."""

    pass


class SyntaxParser(ABC):
    """
    A parser that can be driven token sequence by token sequence.

    Usage is two-step: `parse()` attempts a parse and reports success, after
    which `best_parse()` (and optionally `best_score()`) give the result of
    that attempt.
    """

    @abstractmethod
    def parse(self, tokens: Sequence[str]) -> bool:
        """
        Attempt to parse a token sequence.

        Args:
            tokens:
                Non-empty word tokens.

        Returns:
            True if a parse was found.
        """

    @abstractmethod
    def best_parse(self) -> Tree:
        """
        Return the best tree of the last successful `parse()` call.

        Raises:
            RuntimeError:
                If the last attempt did not succeed.
        """

    def best_score(self) -> float:
        """Return the score of the best tree, or NaN if the parser has none."""

        return math.nan
