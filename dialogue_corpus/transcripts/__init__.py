"""Transcript reading.

Ingestion reads transcripts from different source formats. Each reader turns
a file into an ordered list of raw lines; the line matcher turns a raw line
into speaker and utterance text.
"""

from dialogue_corpus.transcripts.base import LineReader, ReaderError
from dialogue_corpus.transcripts.line_matcher import LineMatch, TranscriptLineMatcher
from dialogue_corpus.transcripts.registry import find_line_reader, read_transcript_lines

__all__ = [
    "LineMatch",
    "LineReader",
    "ReaderError",
    "TranscriptLineMatcher",
    "find_line_reader",
    "read_transcript_lines",
]
