# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parser construction from configuration."""

from dialogue_corpus.config import ConfigError, ParserConfig
from dialogue_corpus.syntax.base import SyntaxParser
from dialogue_corpus.syntax.corenlp import CoreNLPServerParser
from dialogue_corpus.syntax.pcfg import PcfgParser


PARSER_KINDS = ("corenlp", "pcfg")


def default_parser() -> SyntaxParser:
    """The parser used when none is configured: a local CoreNLP server."""

    return CoreNLPServerParser()


def build_parser(config: ParserConfig) -> SyntaxParser:
    """
    Create the parser described by the `parser` config section.

    Args:
        config:
            Parser configuration.

    Returns:
        A parser instance.

    Raises:
        ConfigError:
            If the parser kind is unknown or its grammar cannot be loaded.
    """

    if config.kind == "corenlp":
        return CoreNLPServerParser(config.url)

    if config.kind == "pcfg":
        if config.grammar is None:
            raise ConfigError("parser.grammar is required for parser kind 'pcfg'")
        try:
            return PcfgParser.from_file(config.grammar)
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Failed to load PCFG grammar '{config.grammar}': {exc}") from exc

    raise ConfigError(f"Unknown parser kind: {config.kind} (supported: {', '.join(PARSER_KINDS)})")
