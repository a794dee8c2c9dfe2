# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `corpus.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from dialogue_corpus.config import ConfigError, CorpusConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template corpus.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Corpus identifier (optional; defaults to the config directory name)",
            "corpus_id: my-corpus",
            "",
            "# Directory with one transcript file per dialogue.",
            "# Supported transcript formats: .txt, .md, .odt",
            "# Each line has the form:  MM:SS Speaker: What was said",
            "source_dir: transcripts",
            "",
            "# Work file for the ingested and parsed corpus",
            "corpus_file: work/corpus.yaml",
            "",
            "# Genre label for all dialogues (optional; default shown)",
            "# genre: QU_Genre",
            "",
            "# If true, 'parse' and 'copy-parses' keep existing syntax trees",
            "# and only annotate sentences that have none.",
            "leave_existing: false",
            "",
            "# Syntax parser (optional; defaults to a local CoreNLP server)",
            "# parser:",
            "#   kind: corenlp                 # corenlp | pcfg",
            "#   url: http://localhost:9000    # corenlp only; or set CORENLP_URL",
            "#   grammar: grammar.pcfg         # pcfg only (NLTK PCFG notation)",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="corpus.yaml",
            help="Destination path for the template (default: ./corpus.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: CorpusConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        if dest.exists() and not bool(args.force):
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
