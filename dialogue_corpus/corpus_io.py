# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Corpus work files.

A corpus is stored as a single YAML document:

- `schema_version`, `corpus_id`, `genre_counts`
- `speakers`: speaker records with optional metadata
- `dialogues` -> `turns` -> `sentences`

Syntax trees are stored as flat bracketed strings, scores as floats (`null`
for "no score"). Loading goes through the model API, so identifier
uniqueness is checked again.
"""

import math
import sys
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from nltk.tree import Tree

from dialogue_corpus.model import Corpus, Speaker
from dialogue_corpus.yaml_io import read_yaml_mapping, write_yaml_mapping


SCHEMA_VERSION = 1

_SPEAKER_FIELDS = {f.name for f in fields(Speaker)}


class CorpusFormatError(RuntimeError):
    """Raised when a corpus work file does not have the expected structure."""

    pass


def tree_to_string(tree: Tree) -> str:
    """Render a tree on a single line in Penn Treebank bracket notation."""

    return tree.pformat(margin=sys.maxsize)


def tree_from_string(text: str) -> Tree:
    return Tree.fromstring(text)


def corpus_to_dict(corpus: Corpus) -> dict[str, Any]:
    """Convert a corpus into plain data ready for YAML serialization."""

    dialogues: list[dict[str, Any]] = []
    for dialogue in corpus.dialogues.values():
        turns: list[dict[str, Any]] = []
        for turn in dialogue.turns:
            sentences: list[dict[str, Any]] = []
            for s in turn.sentences:
                sentences.append(
                    {
                        "id": s.id,
                        "num": s.num,
                        "transcription": s.transcription,
                        "tokens": list(s.tokens) if s.tokens is not None else None,
                        "syntax": tree_to_string(s.syntax) if s.syntax is not None else None,
                        "syntax_prob": None if math.isnan(s.syntax_prob) else float(s.syntax_prob),
                        "da_tags": sorted(s.da_tags),
                    }
                )
            turns.append(
                {
                    "num": turn.num,
                    "speaker": turn.speaker.id,
                    "da_tags": sorted(turn.da_tags),
                    "sentences": sentences,
                }
            )
        dialogues.append({"id": dialogue.id, "genre": dialogue.genre, "turns": turns})

    return {
        "schema_version": SCHEMA_VERSION,
        "corpus_id": corpus.id,
        "genre_counts": dict(corpus.genre_counts),
        "speakers": [
            {k: v for k, v in asdict(sp).items() if v is not None} for sp in corpus.speakers.values()
        ],
        "dialogues": dialogues,
    }


def _list(record: dict[str, Any], key: str, context: str) -> list[Any]:
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CorpusFormatError(f"'{key}' must be a list ({context})")
    return value


def _mapping(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise CorpusFormatError(f"Expected a mapping ({context})")
    return value


def corpus_from_dict(data: dict[str, Any]) -> Corpus:
    """
    Rebuild a corpus from data produced by `corpus_to_dict()`.

    Raises:
        CorpusFormatError:
            If the data is structurally invalid, references unknown speakers,
            or contains duplicate identifiers.
    """

    if data.get("schema_version") != SCHEMA_VERSION:
        raise CorpusFormatError(f"Unsupported corpus schema version: {data.get('schema_version')!r}")

    corpus_id = data.get("corpus_id")
    if not isinstance(corpus_id, str) or not corpus_id:
        raise CorpusFormatError("'corpus_id' must be a non-empty string")

    corpus = Corpus(corpus_id)

    genre_counts = data.get("genre_counts") or {}
    if not isinstance(genre_counts, dict):
        raise CorpusFormatError("'genre_counts' must be a mapping")

    try:
        corpus.genre_counts.update({str(k): int(v) for k, v in genre_counts.items()})

        for idx, raw in enumerate(_list(data, "speakers", "corpus"), start=1):
            record = _mapping(raw, f"speakers[{idx}]")
            unknown = set(record) - _SPEAKER_FIELDS
            if unknown or "id" not in record:
                raise CorpusFormatError(f"Invalid speaker record at index {idx}")
            corpus.add_speaker(Speaker(**record))

        for d_idx, raw_dialogue in enumerate(_list(data, "dialogues", "corpus"), start=1):
            d_rec = _mapping(raw_dialogue, f"dialogues[{d_idx}]")
            dialogue = corpus.add_dialogue(str(d_rec["id"]), str(d_rec["genre"]))

            for t_idx, raw_turn in enumerate(_list(d_rec, "turns", dialogue.id), start=1):
                t_rec = _mapping(raw_turn, f"{dialogue.id} turns[{t_idx}]")
                speaker = corpus.speakers.get(str(t_rec["speaker"]))
                if speaker is None:
                    raise CorpusFormatError(f"Unknown speaker '{t_rec['speaker']}' in dialogue '{dialogue.id}'")
                turn = dialogue.add_turn(speaker, num=int(t_rec["num"]))
                turn.da_tags.update(_list(t_rec, "da_tags", f"{dialogue.id} turn {turn.num}"))

                for s_idx, raw_sentence in enumerate(_list(t_rec, "sentences", f"{dialogue.id} turn {turn.num}"), start=1):
                    s_rec = _mapping(raw_sentence, f"{dialogue.id} turn {turn.num} sentences[{s_idx}]")
                    tokens = s_rec.get("tokens")
                    sentence = dialogue.add_sentence(
                        turn,
                        str(s_rec["transcription"]),
                        [str(w) for w in tokens] if tokens is not None else None,
                        num=int(s_rec["num"]),
                        sentence_id=str(s_rec["id"]),
                    )
                    if s_rec.get("syntax") is not None:
                        sentence.syntax = tree_from_string(str(s_rec["syntax"]))
                    if s_rec.get("syntax_prob") is not None:
                        sentence.syntax_prob = float(s_rec["syntax_prob"])
                    sentence.da_tags.update(_list(s_rec, "da_tags", sentence.id))
    except KeyError as exc:
        raise CorpusFormatError(f"Missing required field in corpus data: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise CorpusFormatError(f"Invalid corpus data: {exc}") from exc

    return corpus


def write_corpus(corpus: Corpus, path: Path) -> None:
    """Write a corpus work file."""

    write_yaml_mapping(path, corpus_to_dict(corpus))


def read_corpus(path: Path) -> Corpus:
    """
    Read a corpus work file.

    Raises:
        ConfigError:
            If the file cannot be read as a YAML mapping.
        CorpusFormatError:
            If the content is not a valid corpus.
    """

    return corpus_from_dict(read_yaml_mapping(path))
