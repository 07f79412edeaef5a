"""
Random walks over a built chain.

Walks only read the registry and its transition tables, so any number of walks may run over a
fully built chain.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..capabilities import StateCapabilities
from ..errors import EmptyDomainError
from ..randomness import RandomSource, resolve_random
from .registry import State, StateRegistry
from .transitions import weighted_pick

logger = logging.getLogger(__name__)


def pick_start(registry: StateRegistry, *, rng: Optional[RandomSource] = None) -> State:
    """
    Pick a non-terminal start state uniformly at random.

    A fresh uniform index is drawn after every rejected terminal state.

    :param registry: Registry to sample from.
    :type registry: StateRegistry
    :param rng: Optional injected random source.
    :type rng: RandomSource or None
    :return: Non-terminal state.
    :rtype: State
    :raises EmptyDomainError: If the registry has no non-terminal state.
    """
    if registry.non_terminal_count == 0:
        raise EmptyDomainError(state_count=len(registry))
    source = resolve_random(rng)
    capabilities = registry.capabilities
    while True:
        state = registry[source.randrange(len(registry))]
        if not capabilities.is_terminal(state.payload):
            return state


def next_state(state: State, *, rng: Optional[RandomSource] = None) -> State:
    """
    Advance one step from ``state`` by a weighted random transition.

    :param state: Current state with a non-empty transition table.
    :type state: State
    :param rng: Optional injected random source.
    :type rng: RandomSource or None
    :return: Next state.
    :rtype: State
    """
    source = resolve_random(rng)
    return weighted_pick(state, source.randrange(state.transitions.total))


def generate(
    capabilities: StateCapabilities,
    start: State,
    max_length: int,
    *,
    rng: Optional[RandomSource] = None,
) -> List[State]:
    """
    Walk from ``start`` until a terminal state or the length bound is reached.

    The start state counts toward ``max_length`` but is not rendered here; every state reached
    after it is rendered through ``capabilities.render`` as soon as it is reached.

    :param capabilities: Capabilities providing terminality and rendering.
    :type capabilities: StateCapabilities
    :param start: First state of the walk.
    :type start: State
    :param max_length: Maximum number of states in the walk, start included.
    :type max_length: int
    :param rng: Optional injected random source.
    :type rng: RandomSource or None
    :return: States reached after the start, in order.
    :rtype: list[State]
    :raises ValueError: If ``max_length`` is less than 1.
    """
    if max_length < 1:
        raise ValueError(f"max_length must be at least 1 (got {max_length})")
    source = resolve_random(rng)
    current = start
    length = 1
    reached: List[State] = []
    while not capabilities.is_terminal(current.payload) and length < max_length:
        if current.transitions.is_empty:
            logger.debug("Walk reached dead end at state %d", current.index)
            break
        current = next_state(current, rng=source)
        capabilities.render(current.payload)
        reached.append(current)
        length += 1
    return reached
