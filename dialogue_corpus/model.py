# Dialogue Corpus
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
In-memory corpus representation.

A corpus owns its dialogues (in insertion order), a speaker registry and a
sentence index. Dialogues consist of turns, turns consist of sentences of a
single speaker:

    Corpus -> Dialogue -> Turn -> Sentence

Sentences are created through `Dialogue.add_sentence()` only, so that the
corpus-wide sentence index stays in sync and identifier uniqueness can be
enforced at insertion time.
"""

import math
import sys
from dataclasses import dataclass, field
from typing import Iterator

from nltk.tree import Tree


class DuplicateSentenceError(ValueError):
    """Raised when a sentence identifier is already taken within a corpus."""

    pass


class DuplicateDialogueError(ValueError):
    """Raised when a dialogue identifier is already taken within a corpus."""

    pass


@dataclass(frozen=True)
class Speaker:
    """
    A dialogue participant.

    Attributes:
        id:
            Stable identity key (e.g. the label used in the transcript).
        first_name, last_name, gender, age, occupation:
            Optional demographic/role metadata. Plain-text transcripts carry
            none of it.
    """

    id: str
    first_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    age: int | None = None
    occupation: str | None = None


@dataclass(eq=False)
class Sentence:
    """
    One utterance unit.

    Attributes:
        id:
            Identifier, unique within the owning corpus and stable across
            rebuilds from the same transcripts.
        num:
            Running sentence number within the dialogue (1-based).
        turn:
            The turn this sentence belongs to.
        transcription:
            Raw transcription text.
        tokens:
            Optional pre-tokenized word sequence.
        syntax:
            Optional syntax tree.
        syntax_prob:
            Optional syntax confidence score. NaN means "no score".
        da_tags:
            Dialogue-act tags.
    """

    id: str
    num: int
    turn: Turn
    transcription: str
    tokens: list[str] | None = None
    syntax: Tree | None = None
    syntax_prob: float = math.nan
    da_tags: set[str] = field(default_factory=set)

    @property
    def speaker(self) -> Speaker:
        return self.turn.speaker

    def __repr__(self) -> str:
        return f"Sentence({self.id!r}, {self.speaker.id!r}, {self.transcription!r})"


@dataclass(eq=False)
class Turn:
    """A maximal run of consecutive sentences by the same speaker."""

    num: int
    dialogue: Dialogue
    speaker: Speaker
    sentences: list[Sentence] = field(default_factory=list)
    da_tags: set[str] = field(default_factory=set)

    def __repr__(self) -> str:
        return f"Turn({self.dialogue.id!r}, {self.num}, {self.speaker.id!r}, {len(self.sentences)} sentence(s))"


@dataclass(eq=False)
class Dialogue:
    """One recorded conversation: an ordered sequence of turns."""

    id: str
    genre: str
    corpus: Corpus
    turns: list[Turn] = field(default_factory=list)

    @property
    def sentences(self) -> list[Sentence]:
        """All sentences in turn order, then sentence order."""

        return [s for t in self.turns for s in t.sentences]

    def iter_sentences(self) -> Iterator[Sentence]:
        for turn in self.turns:
            yield from turn.sentences

    def add_turn(self, speaker: Speaker, *, num: int | None = None) -> Turn:
        """
        Open a new turn at the end of the dialogue.

        Args:
            speaker:
                The turn's speaker. Must be registered in the owning corpus.
            num:
                Explicit turn number. Auto-assigned if omitted.

        Returns:
            The new (empty) turn.
        """

        if num is None:
            num = self.turns[-1].num + 1 if self.turns else 1
        turn = Turn(num=num, dialogue=self, speaker=speaker)
        self.turns.append(turn)
        return turn

    def add_sentence(
        self,
        turn: Turn,
        transcription: str,
        tokens: list[str] | None = None,
        *,
        num: int | None = None,
        sentence_id: str | None = None,
    ) -> Sentence:
        """
        Append a sentence to a turn of this dialogue.

        The sentence number continues the dialogue-wide running count unless
        given explicitly; the identifier is derived from the dialogue id and
        sentence number unless given explicitly.

        Raises:
            ValueError:
                If the turn belongs to another dialogue.
            DuplicateSentenceError:
                If the identifier is already taken within the corpus.
        """

        if turn.dialogue is not self:
            raise ValueError(f"Turn {turn!r} does not belong to dialogue '{self.id}'")

        if num is None:
            last = None
            for t in reversed(self.turns):
                if t.sentences:
                    last = t.sentences[-1]
                    break
            num = last.num + 1 if last is not None else 1
        if sentence_id is None:
            sentence_id = f"{self.id}:s{num:04d}"

        sentence = Sentence(id=sentence_id, num=num, turn=turn, transcription=transcription, tokens=tokens)
        self.corpus._register_sentence(sentence)
        turn.sentences.append(sentence)
        return sentence

    def check(self) -> bool:
        """
        Check the dialogue for structural consistency.

        Returns:
            True if the dialogue is non-empty and consistent. Every problem
            found is reported as a warning.
        """

        ok = True

        if not self.turns:
            print(f"WARNING: Dialogue '{self.id}' has no turns", file=sys.stderr)
            return False

        last_num = 0
        for turn in self.turns:
            if not turn.sentences:
                print(f"WARNING: Empty turn {turn.num} in dialogue '{self.id}'", file=sys.stderr)
                ok = False
            if self.corpus.speakers.get(turn.speaker.id) is not turn.speaker:
                print(
                    f"WARNING: Unregistered speaker '{turn.speaker.id}' in dialogue '{self.id}'",
                    file=sys.stderr,
                )
                ok = False
            for sentence in turn.sentences:
                if sentence.turn is not turn:
                    print(f"WARNING: Sentence {sentence.id} is attached to the wrong turn", file=sys.stderr)
                    ok = False
                if sentence.num <= last_num:
                    print(
                        f"WARNING: Sentence numbers out of order in dialogue '{self.id}' at {sentence.id}",
                        file=sys.stderr,
                    )
                    ok = False
                last_num = sentence.num

        return ok


class Corpus:
    """
    A collection of dialogues plus the speaker registry.

    Attributes:
        id:
            Corpus identifier.
        dialogues:
            Mapping dialogue id -> Dialogue, in insertion order.
        speakers:
            Mapping speaker id -> Speaker (deduplicated).
        genre_counts:
            Mapping genre -> maximum number of dialogues to use.
    """

    def __init__(self, corpus_id: str) -> None:
        self.id = corpus_id
        self.dialogues: dict[str, Dialogue] = {}
        self.speakers: dict[str, Speaker] = {}
        self.genre_counts: dict[str, int] = {}
        self._sentences: dict[str, Sentence] = {}

    def __repr__(self) -> str:
        return f"Corpus({self.id!r}, {len(self.dialogues)} dialogue(s), {len(self._sentences)} sentence(s))"

    def add_dialogue(self, dialogue_id: str, genre: str) -> Dialogue:
        """Create and register an empty dialogue."""

        if dialogue_id in self.dialogues:
            raise DuplicateDialogueError(f"Duplicate dialogue id in corpus '{self.id}': {dialogue_id}")
        dialogue = Dialogue(id=dialogue_id, genre=genre, corpus=self)
        self.dialogues[dialogue_id] = dialogue
        return dialogue

    def add_speaker(self, speaker: Speaker) -> Speaker:
        """Register a speaker. An already registered identity keeps its object."""

        return self.speakers.setdefault(speaker.id, speaker)

    def get_or_create_speaker(self, speaker_id: str) -> Speaker:
        """Return the registered speaker, creating one without metadata on first use."""

        speaker = self.speakers.get(speaker_id)
        if speaker is None:
            speaker = Speaker(id=speaker_id)
            self.speakers[speaker_id] = speaker
        return speaker

    def get_sentence(self, sentence_id: str) -> Sentence | None:
        return self._sentences.get(sentence_id)

    def iter_sentences(self) -> Iterator[Sentence]:
        """All sentences in dialogue order, then turn order, then sentence order."""

        for dialogue in self.dialogues.values():
            yield from dialogue.iter_sentences()

    def num_sentences(self) -> int:
        return len(self._sentences)

    def _register_sentence(self, sentence: Sentence) -> None:
        if sentence.id in self._sentences:
            raise DuplicateSentenceError(f"Duplicate sentence id in corpus '{self.id}': {sentence.id}")
        self._sentences[sentence.id] = sentence

    def sanity_check(self) -> bool:
        """
        Check all dialogues and the sentence index.

        Returns:
            True if every dialogue passes `Dialogue.check()` and the sentence
            index contains exactly the sentences reachable via the dialogues.
        """

        ok = True
        if not self.dialogues:
            print(f"WARNING: Corpus '{self.id}' has no dialogues", file=sys.stderr)
            ok = False

        for dialogue in self.dialogues.values():
            if not dialogue.check():
                ok = False

        reachable = 0
        for sentence in self.iter_sentences():
            reachable += 1
            if self._sentences.get(sentence.id) is not sentence:
                print(f"WARNING: Sentence {sentence.id} is missing from the sentence index", file=sys.stderr)
                ok = False
        if reachable != len(self._sentences):
            print(
                f"WARNING: Sentence index holds {len(self._sentences)} sentence(s), "
                f"dialogues hold {reachable}",
                file=sys.stderr,
            )
            ok = False

        return ok
