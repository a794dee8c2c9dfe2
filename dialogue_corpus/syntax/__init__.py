"""Syntactic parsing collaborators.

The corpus parser drives any `SyntaxParser` implementation over a corpus.
Tokenization follows Penn Treebank conventions.
"""

from dialogue_corpus.syntax.base import SyntaxParser, UnknownParserError
from dialogue_corpus.syntax.tokenizer import TreebankTokenizer

__all__ = [
    "SyntaxParser",
    "TreebankTokenizer",
    "UnknownParserError",
]
