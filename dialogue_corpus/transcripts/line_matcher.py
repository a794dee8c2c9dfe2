# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript line matching.

Plain-text transcripts have one utterance per line:

    00:42 Speaker: What the speaker said.

The matcher extracts the speaker label and the utterance text. It does not
decide what to do with lines that do not match; the caller warns and skips.
"""

import re
from typing import NamedTuple


class LineMatch(NamedTuple):
    """Result of matching one transcript line.

    Attributes:
        da_tags:
            Comma-separated dialogue-act tags, or None.
        speaker_id:
            Speaker label.
        text:
            Utterance text, whitespace-trimmed and non-empty.
    """

    da_tags: str | None
    speaker_id: str
    text: str


class TranscriptLineMatcher:
    """Match `MM:SS Speaker: text` lines.

    Subclasses for other transcript formats may override `match_line()` and
    populate `da_tags`.
    """

    LINE_RE = re.compile(r"(?:[0-9]{2}:[0-9]{2}) (?P<speaker>\S[^:]*): (?P<text>.+)")

    def match_line(self, line: str, dialogue_id: str) -> LineMatch | None:
        """
        Match a single transcript line.

        Args:
            line:
                Raw line (without line terminator).
            dialogue_id:
                Identifier of the dialogue the line belongs to.

        Returns:
            The extracted fields, or None if the line does not have the
            expected shape.
        """

        _ = dialogue_id
        m = self.LINE_RE.fullmatch(line)
        if m is None:
            return None

        speaker_id = m.group("speaker").strip()
        text = m.group("text").strip()
        if not speaker_id or not text:
            return None

        return LineMatch(da_tags=None, speaker_id=speaker_id, text=text)
