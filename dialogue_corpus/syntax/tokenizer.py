# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Penn Treebank style tokenization."""

from nltk.tokenize import TreebankWordTokenizer


class TreebankTokenizer:
    """Split raw transcription text into word tokens.

    Does not require any downloaded NLTK data.
    """

    def __init__(self) -> None:
        self._tokenizer = TreebankWordTokenizer()

    def tokenize(self, text: str) -> list[str]:
        if not text or not text.strip():
            return []
        return self._tokenizer.tokenize(text)
