# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Parse alignment between corpora.

Two corpora built from overlapping data share sentence identifiers. Parses
computed for one of them can be copied into the other instead of parsing
again.
"""

import math
import sys

from dialogue_corpus.model import Corpus, Sentence


def copy_parses(source: Corpus, target: Corpus, *, leave_existing: bool = False) -> int:
    """
    Copy syntax trees and scores from `source` to `target` by sentence id.

    A score is only copied if the source sentence has one (not NaN);
    otherwise the target keeps its score. Sentences without a counterpart in
    the source, or whose counterpart has no tree, are reported and skipped.

    Args:
        source:
            Corpus to copy from (not modified).
        target:
            Corpus to copy into (modified in place).
        leave_existing:
            If True, target sentences that already have a tree are skipped.

    Returns:
        Number of target sentences that received a tree.
    """

    lookup: dict[str, Sentence] = {}
    for sentence in source.iter_sentences():
        lookup[sentence.id] = sentence

    total = len(target.dialogues)
    dialogues = 0
    seen = 0
    copied = 0

    for dialogue in target.dialogues.values():
        dialogues += 1
        print(f"Copying parses for dialogue {dialogues} of {total}: {dialogue.id}")

        for sentence in dialogue.iter_sentences():
            seen += 1
            if leave_existing and sentence.syntax is not None:
                continue

            src = lookup.get(sentence.id)
            if src is None:
                print(f"WARNING: No source sentence for {sentence!r}", file=sys.stderr)
                continue
            if src.syntax is None:
                print(f"WARNING: Source has no parse for {sentence!r}", file=sys.stderr)
                continue

            sentence.syntax = src.syntax.copy(deep=True)
            if not math.isnan(src.syntax_prob):
                sentence.syntax_prob = src.syntax_prob
            copied += 1

        print(f"Copied {dialogues} dialogues, {copied} of {seen} sentences ...")

    print(f"Finished (copied {copied} parses for {seen} sentences)")
    return copied
