import math

import pytest
from nltk.tree import Tree

from conftest import StubParser
from dialogue_corpus import parsing
from dialogue_corpus.ingest import CorpusBuilder
from dialogue_corpus.model import Corpus
from dialogue_corpus.parsing import CorpusParser
from dialogue_corpus.syntax.base import UnknownParserError


def test_parses_every_sentence(make_corpus):
    corpus = make_corpus({"d1": [("A", "Hello there."), ("B", "Hi!")], "d2": [("A", "Bye now")]})
    stub = StubParser()

    assert CorpusParser(stub).parse(corpus) == 3

    assert stub.calls == [["Hello", "there", "."], ["Hi", "!"], ["Bye", "now"]]
    for sentence, tokens in zip(corpus.iter_sentences(), stub.calls):
        assert sentence.syntax.leaves() == tokens


def test_pre_tokenized_words_are_used(make_corpus):
    corpus = make_corpus({"d1": [("A", "raw text is ignored")]})
    corpus.get_sentence("d1:s0001").tokens = ["given", "tokens"]
    stub = StubParser()

    CorpusParser(stub).parse(corpus)

    assert stub.calls == [["given", "tokens"]]


def test_leave_existing_keeps_annotated_sentences(make_corpus):
    corpus = make_corpus({"d1": [("A", "one"), ("A", "two")]})
    existing = Tree("OLD", ["one"])
    first = corpus.get_sentence("d1:s0001")
    first.syntax = existing
    stub = StubParser()

    assert CorpusParser(stub).parse(corpus, leave_existing=True) == 1

    assert first.syntax is existing
    assert stub.calls == [["two"]]
    assert corpus.get_sentence("d1:s0002").syntax is not None


def test_default_mode_overwrites_existing_syntax(make_corpus):
    corpus = make_corpus({"d1": [("A", "one")]})
    sentence = corpus.get_sentence("d1:s0001")
    sentence.syntax = Tree("OLD", ["one"])

    assert CorpusParser(StubParser()).parse(corpus) == 1

    assert sentence.syntax == Tree("S", [Tree("X", ["one"])])


def test_failure_clears_existing_syntax(make_corpus, capsys):
    corpus = make_corpus({"d1": [("A", "one")]})
    sentence = corpus.get_sentence("d1:s0001")
    sentence.syntax = Tree("OLD", ["one"])
    parser = CorpusParser(StubParser(succeed=False))

    assert parser.parse(corpus) == 0

    assert sentence.syntax is None
    assert parser.last_stats.failed == 1
    assert "failed." in capsys.readouterr().err


def test_failure_clears_existing_score(make_corpus):
    corpus = make_corpus({"d1": [("A", "one")]})
    sentence = corpus.get_sentence("d1:s0001")
    sentence.syntax = Tree("OLD", ["one"])
    sentence.syntax_prob = 0.5

    CorpusParser(StubParser(succeed=False, score=0.25)).parse(corpus)

    assert sentence.syntax is None
    assert math.isnan(sentence.syntax_prob)


def test_sentence_without_words_is_skipped(make_corpus, capsys):
    corpus = make_corpus({"d1": [("A", "one"), ("B", "two")]})
    empty = corpus.get_sentence("d1:s0001")
    empty.tokens = []
    existing = Tree("OLD", [])
    empty.syntax = existing
    stub = StubParser()
    parser = CorpusParser(stub)

    assert parser.parse(corpus) == 1

    assert empty.syntax is existing
    assert stub.calls == [["two"]]
    assert parser.last_stats.skipped_empty == 1
    assert "No words in sentence" in capsys.readouterr().err


def test_whitespace_transcription_is_skipped(make_corpus):
    corpus = make_corpus({"d1": [("A", "one")]})
    corpus.get_sentence("d1:s0001").transcription = "   "
    stub = StubParser()

    assert CorpusParser(stub).parse(corpus) == 0
    assert stub.calls == []


def test_defined_score_is_stored(make_corpus):
    corpus = make_corpus({"d1": [("A", "one")]})
    CorpusParser(StubParser(score=0.25)).parse(corpus)
    assert corpus.get_sentence("d1:s0001").syntax_prob == 0.25


def test_undefined_score_leaves_existing_score(make_corpus):
    corpus = make_corpus({"d1": [("A", "one")]})
    sentence = corpus.get_sentence("d1:s0001")
    sentence.syntax_prob = 0.5
    CorpusParser(StubParser()).parse(corpus)
    assert sentence.syntax_prob == 0.5
    assert not math.isnan(sentence.syntax_prob)


def test_stats_and_progress(make_corpus, capsys):
    corpus = make_corpus({"d1": [("A", "one"), ("B", "two")], "d2": [("A", "three")]})
    parser = CorpusParser(StubParser())

    parser.parse(corpus)

    stats = parser.last_stats
    assert (stats.dialogues, stats.sentences, stats.parsed, stats.failed) == (2, 3, 3, 0)
    out = capsys.readouterr().out
    assert "Parsing dialogue 1 of 2" in out
    assert "Parsing dialogue 2 of 2" in out
    assert "parsed 3 of 3 sentences" in out


def test_parser_exceptions_propagate(make_corpus):
    class Exploding(StubParser):
        def parse(self, tokens):
            raise ConnectionError("parser went away")

    corpus = make_corpus({"d1": [("A", "one")]})
    with pytest.raises(ConnectionError):
        CorpusParser(Exploding()).parse(corpus)


def test_unknown_parser_is_rejected_at_construction():
    class LooksLikeAParser:
        def parse(self, tokens):
            return True

    with pytest.raises(UnknownParserError):
        CorpusParser(LooksLikeAParser())


def test_missing_parser_installs_default_with_warning(monkeypatch, capsys):
    stub = StubParser()
    monkeypatch.setattr(parsing, "default_parser", lambda: stub)

    parser = CorpusParser()

    assert parser.parser is stub
    assert "WARNING" in capsys.readouterr().err


def test_end_to_end_two_files(tmp_path, write_transcript):
    write_transcript(
        "first.txt",
        [
            "00:01 A: Good morning.",
            "00:02 A: How are you?",
            "00:03 B: Fine, thanks.",
            "00:04 A: Great.",
            "00:05 A: Shall we start?",
        ],
    )
    write_transcript(
        "second.txt",
        [
            "00:01 C: Hello.",
            "00:02 D: Hi there.",
            "00:03 D: Nice weather.",
            "00:04 C: Indeed.",
            "00:05 C: Let us go.",
        ],
    )
    corpus = CorpusBuilder(Corpus("e2e"), tmp_path / "transcripts").setup_corpus()

    assert [len(d.turns) for d in corpus.dialogues.values()] == [3, 3]
    assert CorpusParser(StubParser()).parse(corpus) == 10
