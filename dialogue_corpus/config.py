# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `corpus.yaml`, validating required keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration of the syntax parser.

    Attributes:
        kind:
            Parser implementation. Supported values:
                - `corenlp`: Stanford CoreNLP server
                - `pcfg`: NLTK Viterbi parser over a PCFG grammar file
        url:
            CoreNLP server URL. If omitted, the `CORENLP_URL` environment
            variable or the default local URL is used.
        grammar:
            Grammar file for the `pcfg` parser (resolved path).
    """

    kind: str = "corenlp"
    url: str | None = None
    grammar: Path | None = None


@dataclass(frozen=True)
class CorpusConfig:
    """
    Parsed configuration for a corpus.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths are resolved against.
        corpus_id:
            Corpus identifier.
        source_dir:
            Directory with one transcript file per dialogue.
        corpus_file:
            Work file the ingested/parsed corpus is stored in.
        genre:
            Genre label for all dialogues.
        leave_existing:
            If True, parsing and parse copying skip sentences that already
            have a syntax tree.
        parser:
            Parser configuration. None means the default parser.
    """

    config_path: Path
    base_dir: Path
    corpus_id: str
    source_dir: Path
    corpus_file: Path
    genre: str = "QU_Genre"
    leave_existing: bool = False
    parser: ParserConfig | None = None


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    return Path.cwd() / "corpus.yaml"


def _required_str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value.strip()


def load_config(path: Path) -> CorpusConfig:
    """
    Load and validate a `corpus.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated CorpusConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            "No corpus.yaml found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("source_dir", "corpus_file") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    source_dir = _required_str(raw, "source_dir")
    corpus_file = _required_str(raw, "corpus_file")

    genre = raw.get("genre", CorpusConfig.genre)
    if not isinstance(genre, str) or not genre.strip():
        raise ConfigError("'genre' must be a non-empty string if provided")

    leave_existing = raw.get("leave_existing", CorpusConfig.leave_existing)
    if not isinstance(leave_existing, bool):
        raise ConfigError("'leave_existing' must be a boolean")

    # Interpret paths relative to config file location.
    base_dir = path.parent.resolve()

    corpus_id = raw.get("corpus_id")
    if corpus_id is None:
        corpus_id = base_dir.name or "corpus"
    if not isinstance(corpus_id, str) or not corpus_id.strip():
        raise ConfigError("'corpus_id' must be a non-empty string if provided")

    parser = _parse_parser(raw.get("parser"), base_dir=base_dir)

    return CorpusConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        corpus_id=corpus_id.strip(),
        source_dir=(base_dir / source_dir).resolve(),
        corpus_file=(base_dir / corpus_file).resolve(),
        genre=genre.strip(),
        leave_existing=leave_existing,
        parser=parser,
    )


def _parse_parser(value: Any, *, base_dir: Path) -> ParserConfig | None:
    """
    Parse and validate the optional `parser` section.

    Args:
        value:
            Raw YAML value for the `parser` key.
        base_dir:
            Directory the grammar path is resolved against.

    Returns:
        A ParserConfig instance, or None if the section is missing.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return None

    if not isinstance(value, dict):
        raise ConfigError("'parser' must be a mapping if provided")

    kind = value.get("kind", ParserConfig.kind)
    if not isinstance(kind, str) or not kind.strip():
        raise ConfigError("parser.kind must be a non-empty string")

    kind_norm = kind.strip().lower()
    if kind_norm not in {"corenlp", "pcfg"}:
        raise ConfigError("parser.kind must be either 'corenlp' or 'pcfg'")

    url = value.get("url")
    if url is not None and (not isinstance(url, str) or not url.strip()):
        raise ConfigError("parser.url must be a non-empty string if provided")

    grammar = value.get("grammar")
    if grammar is not None and (not isinstance(grammar, str) or not grammar.strip()):
        raise ConfigError("parser.grammar must be a non-empty string if provided")
    if kind_norm == "pcfg" and grammar is None:
        raise ConfigError("parser.grammar is required for parser kind 'pcfg'")

    return ParserConfig(
        kind=kind_norm,
        url=url.strip() if isinstance(url, str) else None,
        grammar=(base_dir / grammar.strip()).resolve() if isinstance(grammar, str) else None,
    )
