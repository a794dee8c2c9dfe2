# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""TXT/Markdown transcript reader.

One physical line is one transcript line. Line endings are normalized; no
other processing takes place.
"""

from pathlib import Path

from dialogue_corpus.transcripts.base import ReaderError


class TextLineReader:
    """Read .txt and .md transcripts line by line."""

    suffixes = frozenset({".txt", ".md"})

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in self.suffixes

    def read_lines(self, path: Path) -> list[str]:
        try:
            raw = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReaderError(f"Failed to read text file: {exc}", path=path) from exc

        text = raw.replace("\r\n", "\n").replace("\r", "\n")
        return text.split("\n")
