"""
Top-level Markov chain handle.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from ..capabilities import StateCapabilities
from ..errors import ChainClosedError, UnknownStateError
from ..models import ChainSummary
from ..randomness import RandomSource
from .registry import State, StateRegistry
from .transitions import TransitionEntry, record_transition
from .walk import generate, pick_start

logger = logging.getLogger(__name__)


class MarkovChain:
    """
    Markov chain over client-defined states.

    The chain owns one registry and is polymorphic over its values only through
    ``capabilities``. Build the chain with :meth:`add_state` and :meth:`add_transition` (or
    :meth:`observe_sequence`), sample it with :meth:`pick_start` and :meth:`generate`, and
    tear it down with :meth:`close`.

    :param capabilities: Capabilities for the state values.
    :type capabilities: StateCapabilities
    """

    def __init__(self, capabilities: StateCapabilities) -> None:
        self._capabilities = capabilities
        self._registry = StateRegistry(capabilities)
        self._closed = False

    def __enter__(self) -> "MarkovChain":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        self.close()

    def __len__(self) -> int:
        return len(self._registry)

    @property
    def capabilities(self) -> StateCapabilities:
        return self._capabilities

    @property
    def registry(self) -> StateRegistry:
        return self._registry

    @property
    def closed(self) -> bool:
        return self._closed

    def _require_open(self) -> None:
        if self._closed:
            raise ChainClosedError("Markov chain has been closed")

    def add_state(self, value: Any) -> State:
        """
        Register a value, or return its existing state.

        :param value: Client value.
        :type value: Any
        :return: State for the value.
        :rtype: State
        """
        self._require_open()
        return self._registry.register_or_get(value)

    def get_state(self, value: Any) -> Optional[State]:
        self._require_open()
        return self._registry.find(value)

    def add_transition(self, source: State, target: State) -> TransitionEntry:
        """
        Record one observed transition between two registered states.

        :param source: Source state.
        :type source: State
        :param target: Target state.
        :type target: State
        :return: Updated or created transition entry.
        :rtype: TransitionEntry
        :raises UnknownStateError: If either state is not registered in this chain.
        """
        self._require_open()
        for endpoint in (source, target):
            if not self._registry.contains(endpoint):
                raise UnknownStateError(f"State is not registered in this chain: {endpoint!r}")
        return record_transition(source, target, self._capabilities)

    def observe_sequence(self, values: Iterable[Any]) -> int:
        """
        Register a sequence of values and record transitions between neighbours.

        No transition is recorded out of a terminal value.

        :param values: Observed values in order.
        :type values: Iterable[Any]
        :return: Number of values consumed.
        :rtype: int
        """
        self._require_open()
        previous: Optional[State] = None
        consumed = 0
        for value in values:
            state = self._registry.register_or_get(value)
            if previous is not None and not self._capabilities.is_terminal(previous.payload):
                record_transition(previous, state, self._capabilities)
            previous = state
            consumed += 1
        return consumed

    def pick_start(self, *, rng: Optional[RandomSource] = None) -> State:
        """
        Pick a uniformly random non-terminal start state.

        :param rng: Optional injected random source.
        :type rng: RandomSource or None
        :return: Start state.
        :rtype: State
        """
        self._require_open()
        return pick_start(self._registry, rng=rng)

    def generate(
        self, start: State, max_length: int, *, rng: Optional[RandomSource] = None
    ) -> List[State]:
        """
        Render a random walk starting after ``start``.

        :param start: Start state, rendered by the caller.
        :type start: State
        :param max_length: Maximum walk length, start included.
        :type max_length: int
        :param rng: Optional injected random source.
        :type rng: RandomSource or None
        :return: States reached after the start.
        :rtype: list[State]
        """
        self._require_open()
        return generate(self._capabilities, start, max_length, rng=rng)

    def summary(self) -> ChainSummary:
        """
        Compute structural statistics for the chain.

        :return: Chain summary.
        :rtype: ChainSummary
        """
        self._require_open()
        state_count = len(self._registry)
        out_degrees = [len(state.transitions) for state in self._registry]
        dead_ends = sum(
            1
            for state in self._registry
            if state.transitions.is_empty and not self._capabilities.is_terminal(state.payload)
        )
        return ChainSummary(
            domain_id=self._capabilities.domain_id,
            state_count=state_count,
            terminal_state_count=state_count - self._registry.non_terminal_count,
            transition_count=sum(out_degrees),
            observed_transitions=sum(state.transitions.total for state in self._registry),
            dead_end_count=dead_ends,
            max_out_degree=max(out_degrees, default=0),
            mean_out_degree=(sum(out_degrees) / state_count) if state_count else 0.0,
        )

    def close(self) -> None:
        """
        Tear the chain down, releasing every registered payload exactly once.

        Closing an already closed chain does nothing.

        :return: None.
        :rtype: None
        """
        if self._closed:
            return
        self._closed = True
        released = self._registry.release_all()
        logger.debug("Closed %s chain (%d states released)", self._capabilities.domain_id, released)
