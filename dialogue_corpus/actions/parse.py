# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Corpus parsing action.

Loads the corpus work file, parses every sentence with the configured parser
and writes the annotated corpus back.
"""

import argparse
from dataclasses import dataclass

from dialogue_corpus.config import ConfigError, CorpusConfig
from dialogue_corpus.corpus_io import read_corpus, write_corpus
from dialogue_corpus.parsing import CorpusParser
from dialogue_corpus.syntax.registry import build_parser


@dataclass(frozen=True)
class ParseAction:
    """
    `parse` subcommand.
    """

    name: str = "parse"
    help: str = "Parse all sentences of the corpus"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--leave-existing",
            action="store_true",
            default=None,
            help="Keep existing syntax trees (overrides 'leave_existing' from the config)",
        )

    def run(self, args: argparse.Namespace, config: CorpusConfig | None) -> None:
        if config is None:
            raise RuntimeError("ParseAction requires a config, but none was provided")

        if not config.corpus_file.exists():
            raise ConfigError(f"No corpus file found. Run the 'ingest' command first: {config.corpus_file}")

        leave_existing = config.leave_existing if args.leave_existing is None else bool(args.leave_existing)

        parser = CorpusParser(build_parser(config.parser) if config.parser is not None else None)
        print(f"Loading corpus: {config.corpus_file}")
        corpus = read_corpus(config.corpus_file)

        parser.parse(corpus, leave_existing=leave_existing)

        write_corpus(corpus, config.corpus_file)
        print(f"Wrote corpus: {config.corpus_file}")
