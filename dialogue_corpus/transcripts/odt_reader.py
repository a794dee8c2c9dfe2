# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT transcript reader."""

from pathlib import Path

from odfdo import Document

from dialogue_corpus.transcripts.base import ReaderError


def _node_text(node: object) -> str:
    # odfdo Paragraph objects often expose richer text via
    # `inner_text`/`text_recursive` than via `.text`.
    for attr in ("inner_text", "text_recursive", "text"):
        value = getattr(node, attr, None)
        if callable(value):
            value = value()
        if value is not None:
            return str(value)
    return str(node)


class OdtLineReader:
    """Read ODT documents, one transcript line per paragraph."""

    suffixes = frozenset({".odt"})

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in self.suffixes

    def read_lines(self, path: Path) -> list[str]:
        """Extract paragraphs and headings in document order.

        Whitespace inside a paragraph is normalized to single spaces.
        """

        try:
            doc = Document(path)
            nodes = list(doc.body.xpath(".//text:p | .//text:h"))
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to parse ODT file: {exc}", path=path) from exc

        return [" ".join(_node_text(n).split()) for n in nodes]
