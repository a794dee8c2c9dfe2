from __future__ import annotations

"""
Shared action interface.

Every subcommand is an action object. The CLI asks each action for its name,
help text and arguments, loads the corpus config when the action needs one,
then calls `run()`.
"""

import argparse
from typing import Protocol

from dialogue_corpus.config import CorpusConfig


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Attributes:
        name:
            Subcommand name.
        help:
            One-line help text for `--help`.
        requires_config:
            Whether `run()` needs a loaded `corpus.yaml`.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register action-specific arguments on the action's subparser."""

    def run(self, args: argparse.Namespace, config: CorpusConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.

        Raises:
            ConfigError:
                For invalid input or configuration.
        """
