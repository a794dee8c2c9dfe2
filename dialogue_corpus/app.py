"""
CLI entrypoint for the dialogue corpus tool.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import sys
from dotenv import load_dotenv

from dialogue_corpus.actions.copy_parses import CopyParsesAction
from dialogue_corpus.actions.ingest import IngestAction
from dialogue_corpus.actions.parse import ParseAction
from dialogue_corpus.actions.template import TemplateAction
from dialogue_corpus.config import ConfigError, find_config_path, load_config
from dialogue_corpus.corpus_io import CorpusFormatError
from dialogue_corpus.ingest import CorpusSetupError
from dialogue_corpus.syntax.base import UnknownParserError


def _action_repository():
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions = [
		TemplateAction(),
		IngestAction(),
		ParseAction(),
		CopyParsesAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="dialogue-corpus",
		description=(
			"Build dialogue corpora from transcripts and annotate them with syntax trees."
		),
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			"Path to corpus.yaml. If omitted, ./corpus.yaml in the current directory is used."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `2` on configuration/usage errors,
		`1` when the corpus cannot be built, read or parsed.
	"""
	load_dotenv()

	parser = build_parser()
	args = parser.parse_args(argv)

	try:
		actions = _action_repository()
		action = actions[args._action_name]

		config = None
		if action.requires_config:
			config_path = find_config_path(getattr(args, "config", None))
			config = load_config(config_path)

		action.run(args, config)
		return 0
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2
	except (CorpusSetupError, CorpusFormatError, UnknownParserError) as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 1


if __name__ == "__main__":
	raise SystemExit(main())
