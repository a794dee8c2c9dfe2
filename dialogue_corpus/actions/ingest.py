# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Corpus ingestion action.

Builds a corpus from the configured transcript directory and writes it to the
corpus work file.
"""

import argparse
from dataclasses import dataclass

from dialogue_corpus.cli_io import confirm_overwrite
from dialogue_corpus.config import CorpusConfig
from dialogue_corpus.corpus_io import write_corpus
from dialogue_corpus.ingest import CorpusBuilder
from dialogue_corpus.model import Corpus


@dataclass(frozen=True)
class IngestAction:
    """
    `ingest` subcommand.

    Reads all transcripts in `source_dir` into a new corpus.
    """

    name: str = "ingest"
    help: str = "Build the corpus from transcript files"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite an existing corpus file without asking",
        )

    def run(self, args: argparse.Namespace, config: CorpusConfig | None) -> None:
        """
        Build and store the corpus.

        Raises:
            ConfigError:
                If the corpus file exists and may not be overwritten.
            CorpusSetupError:
                If any transcript fails to load or the corpus fails its
                sanity check.
        """

        if config is None:
            raise RuntimeError("IngestAction requires a config, but none was provided")

        if not confirm_overwrite(config.corpus_file, force=bool(args.force)):
            print(f"Keeping existing file: {config.corpus_file}")
            return

        builder = CorpusBuilder(Corpus(config.corpus_id), config.source_dir, genre=config.genre)
        corpus = builder.setup_corpus()

        write_corpus(corpus, config.corpus_file)
        print(f"Wrote corpus: {config.corpus_file}")
