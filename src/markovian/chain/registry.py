"""
Append-only registry of distinct chain states.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from ..capabilities import StateCapabilities
from ..errors import ChainAllocationError
from .transitions import TransitionTable

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class State:
    """
    One distinct value tracked by a chain.

    States compare by object identity. Value identity is decided by the chain capabilities.

    :ivar payload: Chain-owned copy of the client value.
    :vartype payload: Any
    :ivar index: Position of the state in its registry.
    :vartype index: int
    :ivar transitions: Outgoing transitions observed from this state.
    :vartype transitions: TransitionTable
    """

    payload: Any
    index: int
    transitions: TransitionTable = field(default_factory=TransitionTable)

    def __repr__(self) -> str:
        return f"State(index={self.index}, payload={self.payload!r}, total={self.transitions.total})"


class StateRegistry:
    """
    Insertion-ordered collection of unique states.

    :param capabilities: Capabilities used to compare, copy and classify values.
    :type capabilities: StateCapabilities
    """

    def __init__(self, capabilities: StateCapabilities) -> None:
        self._capabilities = capabilities
        self._states: List[State] = []
        self._non_terminal_count = 0

    @property
    def capabilities(self) -> StateCapabilities:
        return self._capabilities

    @property
    def non_terminal_count(self) -> int:
        """
        Number of registered states whose payload is not terminal.

        :return: Non-terminal state count.
        :rtype: int
        """
        return self._non_terminal_count

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __getitem__(self, index: int) -> State:
        return self._states[index]

    def find(self, value: Any) -> Optional[State]:
        """
        Look up the state whose payload compares equal to ``value``.

        :param value: Client value.
        :type value: Any
        :return: Matching state or None.
        :rtype: State or None
        """
        for state in self._states:
            if self._capabilities.compare(state.payload, value) == 0:
                return state
        return None

    def contains(self, state: State) -> bool:
        """
        Report whether ``state`` is a member of this registry.

        :param state: State to check.
        :type state: State
        :return: True when the state object belongs to this registry.
        :rtype: bool
        """
        return 0 <= state.index < len(self._states) and self._states[state.index] is state

    def register_or_get(self, value: Any) -> State:
        """
        Return the state for ``value``, registering a copy of it when it is new.

        :param value: Client value. Must not be None.
        :type value: Any
        :return: Existing or newly appended state.
        :rtype: State
        :raises ValueError: If the value is None.
        :raises ChainAllocationError: If the value cannot be copied. The registry is unchanged.
        """
        if value is None:
            raise ValueError("State values must not be None")
        existing = self.find(value)
        if existing is not None:
            return existing
        try:
            payload = self._capabilities.duplicate(value)
        except MemoryError as exc:
            raise ChainAllocationError() from exc
        if payload is None:
            raise ChainAllocationError()
        try:
            terminal = bool(self._capabilities.is_terminal(payload))
        except Exception:
            self._capabilities.release(payload)
            raise
        state = State(payload=payload, index=len(self._states))
        try:
            self._states.append(state)
        except MemoryError as exc:
            self._capabilities.release(payload)
            raise ChainAllocationError() from exc
        if not terminal:
            self._non_terminal_count += 1
        logger.debug("Registered state %d: %r", state.index, payload)
        return state

    def release_all(self) -> int:
        """
        Release every payload exactly once and empty the registry.

        :return: Number of states released.
        :rtype: int
        """
        states = self._states
        self._states = []
        self._non_terminal_count = 0
        for state in states:
            self._capabilities.release(state.payload)
        logger.debug("Released %d states", len(states))
        return len(states)
