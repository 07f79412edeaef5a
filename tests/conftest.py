"""
Shared test doubles for Markovian tests.
"""

from __future__ import annotations

import io
from typing import Iterable, List

import pytest

from markovian.capabilities import StateCapabilities


class RecordingCapabilities(StateCapabilities):
    """
    String capabilities that record every duplicate, release and render call.
    """

    domain_id = "recording"

    def __init__(self, terminal_suffix: str = ".") -> None:
        self.terminal_suffix = terminal_suffix
        self.duplicated: List[str] = []
        self.released: List[str] = []
        self.rendered: List[str] = []
        self.stream = io.StringIO()

    def compare(self, first: str, second: str) -> int:
        return (first > second) - (first < second)

    def duplicate(self, value: str) -> str:
        self.duplicated.append(value)
        return str(value)

    def release(self, value: str) -> None:
        self.released.append(value)

    def is_terminal(self, value: str) -> bool:
        return value.endswith(self.terminal_suffix)

    def render(self, value: str) -> None:
        self.rendered.append(value)


class SequenceRandom:
    """
    Random source that returns scripted values and records the bounds it was asked for.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.bounds: List[int] = []

    def randrange(self, stop: int) -> int:
        self.bounds.append(stop)
        value = self._values.pop(0)
        assert 0 <= value < stop, f"scripted value {value} outside [0, {stop})"
        return value


@pytest.fixture
def capabilities() -> RecordingCapabilities:
    return RecordingCapabilities()
