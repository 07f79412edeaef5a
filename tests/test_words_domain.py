"""
Word domain tests.
"""

from __future__ import annotations

import io

import pytest

from markovian.domains.words import (
    WordCapabilities,
    build_word_chain,
    read_corpus_lines,
    tokenize,
    write_tweets,
)
from markovian.errors import EmptyDomainError

from conftest import SequenceRandom


def test_tokenize_splits_on_whitespace_across_lines():
    """
    Tokens are split on spaces, tabs, carriage returns and newlines.
    """
    lines = ["The cat\tsat.\r\n", "  On the  mat.", ""]
    assert list(tokenize(lines)) == ["The", "cat", "sat.", "On", "the", "mat."]


def test_word_capabilities_semantics():
    """
    Words compare as strings, end sentences with a period and render with a trailing space.
    """
    stream = io.StringIO()
    capabilities = WordCapabilities(stream)
    assert capabilities.compare("a", "b") < 0
    assert capabilities.compare("b", "a") > 0
    assert capabilities.compare("a", "a") == 0
    assert capabilities.is_terminal("end.")
    assert not capabilities.is_terminal("end")
    capabilities.render("word")
    assert stream.getvalue() == "word "


def test_build_word_chain_links_consecutive_words():
    """
    Transitions follow reading order and are not recorded out of sentence ends.
    """
    chain = build_word_chain(["the dog ran.", "the dog sat.", "a dog ran."])
    the_state = chain.get_state("the")
    dog_state = chain.get_state("dog")
    assert the_state.transitions.total == 2
    assert the_state.transitions.count_for(dog_state, chain.capabilities) == 2
    assert [entry.target.payload for entry in dog_state.transitions] == ["ran.", "sat."]
    assert chain.get_state("ran.").transitions.is_empty
    assert chain.get_state("sat.").transitions.is_empty
    assert [state.payload for state in chain.registry] == ["the", "dog", "ran.", "sat.", "a"]


def test_build_word_chain_honours_word_limit():
    """
    Only the first N tokens are read when a limit is given.
    """
    chain = build_word_chain(["one two three.", "four five."], word_limit=4)
    assert [state.payload for state in chain.registry] == ["one", "two", "three.", "four"]
    assert chain.get_state("five.") is None


def test_build_word_chain_rejects_invalid_limit():
    """
    A word limit must be positive.
    """
    with pytest.raises(ValueError):
        build_word_chain(["a b."], word_limit=0)


def test_read_corpus_lines_reports_missing_file(tmp_path):
    """
    A missing corpus reports the incorrect file path message.
    """
    with pytest.raises(FileNotFoundError) as info:
        read_corpus_lines(tmp_path / "missing.txt")
    assert str(info.value) == "Error: incorrect file path"


def test_write_tweets_formats_each_sentence():
    """
    Each sentence starts with its number, then the start word and the walk.
    """
    stream = io.StringIO()
    chain = build_word_chain(["hello world."], capabilities=WordCapabilities(stream))
    write_tweets(chain, count=2, max_length=20, rng=SequenceRandom([0, 0, 0, 0]))
    assert stream.getvalue() == "Tweet 1: hello world. \nTweet 2: hello world. \n"


def test_write_tweets_respects_max_length():
    """
    A sentence never has more words than the length bound.
    """
    stream = io.StringIO()
    chain = build_word_chain(["la la la la la la la la la la la la"], capabilities=WordCapabilities(stream))
    write_tweets(chain, count=1, max_length=5, rng=SequenceRandom([0] * 10))
    line = stream.getvalue().rstrip("\n")
    assert line == "Tweet 1: la la la la la "


@pytest.mark.parametrize("lines", [[], ["one. two."]])
def test_write_tweets_writes_nothing_without_a_start_word(lines):
    """
    When no start word can be chosen the error surfaces before any header is written.
    """
    stream = io.StringIO()
    chain = build_word_chain(lines, capabilities=WordCapabilities(stream))
    with pytest.raises(EmptyDomainError):
        write_tweets(chain, count=2, max_length=20, rng=SequenceRandom([0, 0]))
    assert stream.getvalue() == ""
