# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Parse copying action.

Copies syntax trees from another (already parsed) corpus work file into the
configured corpus, matching sentences by identifier.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from dialogue_corpus.alignment import copy_parses
from dialogue_corpus.config import ConfigError, CorpusConfig
from dialogue_corpus.corpus_io import read_corpus, write_corpus


@dataclass(frozen=True)
class CopyParsesAction:
    """
    `copy-parses` subcommand.
    """

    name: str = "copy-parses"
    help: str = "Copy syntax trees from another corpus file"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "source",
            help="Corpus work file to copy parses from",
        )
        parser.add_argument(
            "--leave-existing",
            action="store_true",
            default=None,
            help="Keep existing syntax trees (overrides 'leave_existing' from the config)",
        )

    def run(self, args: argparse.Namespace, config: CorpusConfig | None) -> None:
        if config is None:
            raise RuntimeError("CopyParsesAction requires a config, but none was provided")

        source_path = Path(args.source)
        if not source_path.is_file():
            raise ConfigError(f"Source corpus file not found: {source_path}")
        if not config.corpus_file.exists():
            raise ConfigError(f"No corpus file found. Run the 'ingest' command first: {config.corpus_file}")

        leave_existing = config.leave_existing if args.leave_existing is None else bool(args.leave_existing)

        print(f"Loading source corpus: {source_path}")
        source = read_corpus(source_path)
        print(f"Loading corpus: {config.corpus_file}")
        target = read_corpus(config.corpus_file)

        copy_parses(source, target, leave_existing=leave_existing)

        write_corpus(target, config.corpus_file)
        print(f"Wrote corpus: {config.corpus_file}")
