import math

import pytest
from nltk.tree import Tree

from dialogue_corpus.model import Corpus, DuplicateDialogueError, DuplicateSentenceError, Speaker


def test_sentence_numbers_and_ids_run_across_turns():
    corpus = Corpus("c")
    dialogue = corpus.add_dialogue("d1", "QU_Genre")
    a = corpus.get_or_create_speaker("A")
    b = corpus.get_or_create_speaker("B")

    t1 = dialogue.add_turn(a)
    s1 = dialogue.add_sentence(t1, "one")
    s2 = dialogue.add_sentence(t1, "two")
    t2 = dialogue.add_turn(b)
    s3 = dialogue.add_sentence(t2, "three")

    assert [t1.num, t2.num] == [1, 2]
    assert [s.num for s in (s1, s2, s3)] == [1, 2, 3]
    assert [s.id for s in dialogue.sentences] == ["d1:s0001", "d1:s0002", "d1:s0003"]
    assert s3.speaker is b
    assert corpus.get_sentence("d1:s0002") is s2


def test_new_sentence_defaults():
    corpus = Corpus("c")
    dialogue = corpus.add_dialogue("d1", "QU_Genre")
    turn = dialogue.add_turn(corpus.get_or_create_speaker("A"))
    sentence = dialogue.add_sentence(turn, "hello")

    assert sentence.tokens is None
    assert sentence.syntax is None
    assert math.isnan(sentence.syntax_prob)
    assert sentence.da_tags == set()


def test_speaker_registry_creates_once():
    corpus = Corpus("c")
    first = corpus.get_or_create_speaker("A")
    assert corpus.get_or_create_speaker("A") is first
    assert first == Speaker(id="A")

    # An already registered identity keeps its object.
    assert corpus.add_speaker(Speaker(id="A", gender="f")) is first


def test_duplicate_sentence_id_is_rejected():
    corpus = Corpus("c")
    dialogue = corpus.add_dialogue("d1", "QU_Genre")
    turn = dialogue.add_turn(corpus.get_or_create_speaker("A"))
    dialogue.add_sentence(turn, "one", sentence_id="x")

    with pytest.raises(DuplicateSentenceError):
        dialogue.add_sentence(turn, "two", sentence_id="x")

    assert len(turn.sentences) == 1
    assert corpus.num_sentences() == 1


def test_duplicate_dialogue_id_is_rejected():
    corpus = Corpus("c")
    corpus.add_dialogue("d1", "QU_Genre")
    with pytest.raises(DuplicateDialogueError):
        corpus.add_dialogue("d1", "QU_Genre")


def test_turn_of_other_dialogue_is_rejected():
    corpus = Corpus("c")
    d1 = corpus.add_dialogue("d1", "QU_Genre")
    d2 = corpus.add_dialogue("d2", "QU_Genre")
    turn = d1.add_turn(corpus.get_or_create_speaker("A"))
    with pytest.raises(ValueError):
        d2.add_sentence(turn, "hi")


def test_check_fails_for_empty_dialogue_and_empty_turn(capsys):
    corpus = Corpus("c")
    empty = corpus.add_dialogue("empty", "QU_Genre")
    assert not empty.check()

    dialogue = corpus.add_dialogue("d1", "QU_Genre")
    dialogue.add_turn(corpus.get_or_create_speaker("A"))
    assert not dialogue.check()
    assert "Empty turn" in capsys.readouterr().err


def test_check_fails_for_unregistered_speaker():
    corpus = Corpus("c")
    dialogue = corpus.add_dialogue("d1", "QU_Genre")
    turn = dialogue.add_turn(Speaker(id="ghost"))
    dialogue.add_sentence(turn, "boo")
    assert not dialogue.check()


def test_sanity_check(make_corpus):
    corpus = make_corpus({"d1": [("A", "hi"), ("B", "hello")], "d2": [("A", "bye")]})
    assert corpus.sanity_check()

    assert not Corpus("empty").sanity_check()


def test_iteration_order(make_corpus):
    corpus = make_corpus(
        {
            "d2": [("A", "a1"), ("B", "b1")],
            "d1": [("A", "a2")],
        }
    )
    assert list(corpus.dialogues) == ["d2", "d1"]
    assert [s.transcription for s in corpus.iter_sentences()] == ["a1", "b1", "a2"]


def test_syntax_is_stored_on_sentence(make_corpus):
    corpus = make_corpus({"d1": [("A", "hi")]})
    sentence = corpus.get_sentence("d1:s0001")
    sentence.syntax = Tree("S", ["hi"])
    assert corpus.get_sentence("d1:s0001").syntax == Tree("S", ["hi"])
