import math
from pathlib import Path

import pytest
import yaml
from nltk.tree import Tree

from dialogue_corpus.config import ConfigError
from dialogue_corpus.corpus_io import CorpusFormatError, corpus_to_dict, read_corpus, write_corpus
from dialogue_corpus.model import Speaker


def test_write_and_read_back(tmp_path, make_corpus):
    corpus = make_corpus({"d1": [("A", "I see you"), ("B", "ok")], "d2": [("A", "bye")]}, "c1")
    corpus.add_speaker(Speaker(id="Z", first_name="Zoe", age=42))
    corpus.genre_counts["QU_Genre"] = 7
    first = corpus.get_sentence("d1:s0001")
    first.tokens = ["I", "see", "you"]
    first.syntax = Tree.fromstring("(S (NP I) (VP (V see) (NP you)))")
    first.syntax_prob = 0.24
    first.da_tags.update({"sd", "aa"})
    first.turn.da_tags.add("sd")

    path = tmp_path / "work" / "corpus.yaml"
    write_corpus(corpus, path)
    loaded = read_corpus(path)

    assert loaded.id == "c1"
    assert loaded.genre_counts == {"QU_Genre": 7}
    assert loaded.speakers["Z"] == Speaker(id="Z", first_name="Zoe", age=42)
    assert list(loaded.dialogues) == ["d1", "d2"]
    assert [s.id for s in loaded.iter_sentences()] == [s.id for s in corpus.iter_sentences()]

    s = loaded.get_sentence("d1:s0001")
    assert s.tokens == ["I", "see", "you"]
    assert s.syntax == first.syntax
    assert s.syntax_prob == pytest.approx(0.24)
    assert s.da_tags == {"sd", "aa"}
    assert s.turn.da_tags == {"sd"}
    assert s.speaker is loaded.speakers["A"]

    other = loaded.get_sentence("d1:s0002")
    assert other.tokens is None
    assert other.syntax is None
    assert math.isnan(other.syntax_prob)
    assert loaded.sanity_check()


def test_trees_are_stored_on_one_line(make_corpus):
    corpus = make_corpus({"d1": [("A", "x")]})
    corpus.get_sentence("d1:s0001").syntax = Tree.fromstring(
        "(S (NP (DT the) (JJ quick) (JJ brown) (NN fox)) (VP (VBZ jumps) (PP (IN over) (NP (DT the) (JJ lazy) (NN dog)))))"
    )

    data = corpus_to_dict(corpus)
    stored = data["dialogues"][0]["turns"][0]["sentences"][0]

    assert "\n" not in stored["syntax"]
    assert stored["syntax"].startswith("(S (NP (DT the)")
    assert stored["syntax_prob"] is None


def _write(tmp_path, data) -> Path:
    path = tmp_path / "corpus.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_duplicate_sentence_ids_are_rejected(tmp_path, make_corpus):
    data = corpus_to_dict(make_corpus({"d1": [("A", "one"), ("B", "two")]}))
    data["dialogues"][0]["turns"][1]["sentences"][0]["id"] = "d1:s0001"

    with pytest.raises(CorpusFormatError):
        read_corpus(_write(tmp_path, data))


def test_unknown_speaker_is_rejected(tmp_path, make_corpus):
    data = corpus_to_dict(make_corpus({"d1": [("A", "one")]}))
    data["speakers"] = []

    with pytest.raises(CorpusFormatError):
        read_corpus(_write(tmp_path, data))


def test_schema_version_is_checked(tmp_path, make_corpus):
    data = corpus_to_dict(make_corpus({"d1": [("A", "one")]}))
    data["schema_version"] = 99

    with pytest.raises(CorpusFormatError):
        read_corpus(_write(tmp_path, data))


def test_missing_fields_are_reported(tmp_path, make_corpus):
    data = corpus_to_dict(make_corpus({"d1": [("A", "one")]}))
    del data["dialogues"][0]["turns"][0]["sentences"][0]["transcription"]

    with pytest.raises(CorpusFormatError):
        read_corpus(_write(tmp_path, data))


def test_unreadable_file(tmp_path):
    with pytest.raises(ConfigError):
        read_corpus(tmp_path / "missing.yaml")
