"""
Word-level chains built from a text corpus.

Each whitespace-delimited token is a state. A token ending with a period ends a sentence, so
no transition is recorded out of it and walks stop when they reach it.
"""

from __future__ import annotations

import logging
import re
import sys
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO

from ..capabilities import StateCapabilities
from ..chain import MarkovChain
from ..constants import FILE_PATH_ERROR_MESSAGE, SENTENCE_END, WORD_DELIMITERS
from ..randomness import RandomSource

logger = logging.getLogger(__name__)

_DELIMITER_PATTERN = re.compile("[" + re.escape(WORD_DELIMITERS) + "]+")


class WordCapabilities(StateCapabilities):
    """
    Capabilities for word states.

    :param stream: Optional output stream for rendering; defaults to the current standard output.
    :type stream: TextIO or None
    """

    domain_id = "words"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def compare(self, first: str, second: str) -> int:
        return (first > second) - (first < second)

    def duplicate(self, value: str) -> str:
        return str(value)

    def is_terminal(self, value: str) -> bool:
        return value.endswith(SENTENCE_END)

    def render(self, value: str) -> None:
        self.stream.write(f"{value} ")


def tokenize(lines: Iterable[str]) -> Iterator[str]:
    """
    Split lines into word tokens.

    :param lines: Text lines.
    :type lines: Iterable[str]
    :return: Tokens in reading order.
    :rtype: Iterator[str]
    """
    for line in lines:
        for token in _DELIMITER_PATTERN.split(line):
            if token:
                yield token


def read_corpus_lines(path: Path) -> List[str]:
    """
    Read a corpus file into lines.

    :param path: Corpus file path.
    :type path: Path
    :return: Corpus lines.
    :rtype: list[str]
    :raises FileNotFoundError: If the path is not a readable file.
    """
    if not path.is_file():
        raise FileNotFoundError(FILE_PATH_ERROR_MESSAGE)
    return path.read_text(encoding="utf-8").splitlines()


def build_word_chain(
    lines: Iterable[str],
    *,
    word_limit: Optional[int] = None,
    capabilities: Optional[WordCapabilities] = None,
) -> MarkovChain:
    """
    Build a word chain from corpus lines.

    :param lines: Corpus lines.
    :type lines: Iterable[str]
    :param word_limit: Optional number of leading tokens to read.
    :type word_limit: int or None
    :param capabilities: Optional word capabilities (for a custom output stream).
    :type capabilities: WordCapabilities or None
    :return: Built chain.
    :rtype: MarkovChain
    :raises ValueError: If ``word_limit`` is less than 1.
    """
    if word_limit is not None and word_limit < 1:
        raise ValueError(f"word_limit must be at least 1 (got {word_limit})")
    chain = MarkovChain(capabilities or WordCapabilities())
    tokens: Iterable[str] = tokenize(lines)
    if word_limit is not None:
        tokens = islice(tokens, word_limit)
    consumed = chain.observe_sequence(tokens)
    logger.info("Read %d words into %d distinct states", consumed, len(chain))
    return chain


def write_tweets(
    chain: MarkovChain,
    *,
    count: int,
    max_length: int,
    rng: Optional[RandomSource] = None,
) -> None:
    """
    Generate and print sentences from a word chain.

    Each line reads ``Tweet <n>: `` followed by a random start word and the walk from it.

    :param chain: Built word chain.
    :type chain: MarkovChain
    :param count: Number of sentences.
    :type count: int
    :param max_length: Maximum words per sentence.
    :type max_length: int
    :param rng: Optional injected random source.
    :type rng: RandomSource or None
    :return: None.
    :rtype: None
    """
    capabilities = chain.capabilities
    stream = capabilities.stream
    for number in range(1, count + 1):
        start = chain.pick_start(rng=rng)
        stream.write(f"Tweet {number}: ")
        capabilities.render(start.payload)
        chain.generate(start, max_length, rng=rng)
        stream.write("\n")
