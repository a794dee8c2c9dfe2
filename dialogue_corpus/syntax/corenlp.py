# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Stanford CoreNLP constituency parser.

Sends pre-tokenized sentences to a running CoreNLP server through NLTK's
client. The server is started separately, e.g.:

    java -mx4g -cp "*" edu.stanford.nlp.pipeline.StanfordCoreNLPServer -port 9000

Environment variables:
    - `CORENLP_URL`: Server URL (default: http://localhost:9000)
"""

from __future__ import annotations

import os
from typing import Sequence

from nltk.parse.corenlp import CoreNLPParser
from nltk.tree import Tree

from dialogue_corpus.syntax.base import SyntaxParser


DEFAULT_CORENLP_URL = "http://localhost:9000"


def corenlp_url_from_env() -> str:
    return os.environ.get("CORENLP_URL") or DEFAULT_CORENLP_URL


class CoreNLPServerParser(SyntaxParser):
    """
    Parser backed by a CoreNLP server.

    Connection problems are not handled here: they propagate to the caller.
    """

    def __init__(self, url: str | None = None) -> None:
        self.url = (url or corenlp_url_from_env()).rstrip("/")
        self._client = CoreNLPParser(url=self.url)
        self._best: Tree | None = None

    def __repr__(self) -> str:
        return f"CoreNLPServerParser(url={self.url!r})"

    def parse(self, tokens: Sequence[str]) -> bool:
        self._best = next(iter(self._client.parse(list(tokens))), None)
        return self._best is not None

    def best_parse(self) -> Tree:
        if self._best is None:
            raise RuntimeError("No successful parse available")
        return self._best
