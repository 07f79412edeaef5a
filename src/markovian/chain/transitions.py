"""
Frequency-weighted transition tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from ..capabilities import StateCapabilities
from ..errors import ChainAllocationError

if TYPE_CHECKING:
    from .registry import State


@dataclass
class TransitionEntry:
    """
    Observed transition to a single target state.

    The target is owned by the registry; an entry only refers to it.

    :ivar target: Target state.
    :vartype target: State
    :ivar count: Number of times the transition was observed.
    :vartype count: int
    """

    target: "State"
    count: int = 1


class TransitionTable:
    """
    Outgoing transitions of one source state, in first-observed order.
    """

    def __init__(self) -> None:
        self._entries: List[TransitionEntry] = []
        self._total = 0

    @property
    def entries(self) -> Tuple[TransitionEntry, ...]:
        """
        Transition entries in insertion order.

        :return: Entries.
        :rtype: tuple[TransitionEntry, ...]
        """
        return tuple(self._entries)

    @property
    def total(self) -> int:
        """
        Sum of all entry counts.

        :return: Total observed transitions from the source state.
        :rtype: int
        """
        return self._total

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TransitionEntry]:
        return iter(self._entries)

    def find(self, target: "State", capabilities: StateCapabilities) -> Optional[TransitionEntry]:
        """
        Find the entry whose target denotes the same state as ``target``.

        :param target: Target state to look for.
        :type target: State
        :param capabilities: Capabilities providing the comparison.
        :type capabilities: StateCapabilities
        :return: Matching entry or None.
        :rtype: TransitionEntry or None
        """
        for entry in self._entries:
            if capabilities.compare(entry.target.payload, target.payload) == 0:
                return entry
        return None

    def count_for(self, target: "State", capabilities: StateCapabilities) -> int:
        entry = self.find(target, capabilities)
        return 0 if entry is None else entry.count

    def record(self, target: "State", capabilities: StateCapabilities) -> TransitionEntry:
        """
        Record one observed transition to ``target``.

        An existing entry is incremented; otherwise a new entry with count 1 is appended.

        :param target: Target state.
        :type target: State
        :param capabilities: Capabilities providing the comparison.
        :type capabilities: StateCapabilities
        :return: The entry that was incremented or created.
        :rtype: TransitionEntry
        :raises ChainAllocationError: If the entry list cannot grow. The table is unchanged.
        """
        entry = self.find(target, capabilities)
        if entry is not None:
            entry.count += 1
            self._total += 1
            return entry
        try:
            entry = TransitionEntry(target=target)
            self._entries.append(entry)
        except MemoryError as exc:
            raise ChainAllocationError() from exc
        self._total += 1
        return entry

    def pick(self, random_value: int) -> "State":
        """
        Select a target using a random value drawn from ``[0, total)``.

        Entries are walked in insertion order while accumulating counts. The first entry whose
        cumulative count exceeds ``random_value`` is selected.

        :param random_value: Random integer in ``[0, total)``.
        :type random_value: int
        :return: Selected target state.
        :rtype: State
        :raises ValueError: If the table is empty or the value is out of range.
        """
        if self._total <= 0:
            raise ValueError("Cannot pick a transition from an empty transition table")
        if random_value < 0 or random_value >= self._total:
            raise ValueError(
                f"Random value must be in [0, {self._total}) (got {random_value})"
            )
        cumulative = 0
        for entry in self._entries:
            cumulative += entry.count
            if cumulative > random_value:
                return entry.target
        raise AssertionError("Transition counts do not sum to the table total")


def record_transition(
    source: "State", target: "State", capabilities: StateCapabilities
) -> TransitionEntry:
    """
    Record an observed transition from ``source`` to ``target``.

    :param source: Source state.
    :type source: State
    :param target: Target state; may be the source itself.
    :type target: State
    :param capabilities: Capabilities providing the comparison.
    :type capabilities: StateCapabilities
    :return: The entry that was incremented or created.
    :rtype: TransitionEntry
    :raises ChainAllocationError: If the source table cannot grow.
    """
    return source.transitions.record(target, capabilities)


def weighted_pick(source: "State", random_value: int) -> "State":
    """
    Deterministically choose the next state for a given random value.

    :param source: Source state with a non-empty transition table.
    :type source: State
    :param random_value: Random integer in ``[0, source.transitions.total)``.
    :type random_value: int
    :return: Selected target state.
    :rtype: State
    """
    return source.transitions.pick(random_value)
