"""
Dialogue corpus package.

This package contains a small toolkit that:
- ingests dialogue transcripts into a corpus of dialogues, turns and sentences,
- annotates every sentence with a syntax tree using a pluggable parser,
- copies existing syntax annotation between corpora that share sentence ids.
"""

from __future__ import annotations
