"""
State registry tests.
"""

from __future__ import annotations

import pytest

from markovian.chain.registry import StateRegistry
from markovian.errors import ChainAllocationError

from conftest import RecordingCapabilities


class FailingCopyCapabilities(RecordingCapabilities):
    def __init__(self, *, raise_error: bool) -> None:
        super().__init__()
        self.raise_error = raise_error

    def duplicate(self, value: str) -> str:
        if value == "boom":
            if self.raise_error:
                raise MemoryError("no memory")
            return None  # type: ignore[return-value]
        return super().duplicate(value)


def test_register_or_get_is_idempotent(capabilities):
    """
    Registering an equal value twice returns the same state and copies only once.
    """
    registry = StateRegistry(capabilities)
    first = registry.register_or_get("A")
    second = registry.register_or_get("A")
    assert first is second
    assert len(registry) == 1
    assert capabilities.duplicated == ["A"]


def test_registry_never_holds_equal_states(capabilities):
    """
    Repeated registrations keep distinct values only, in first-seen order.
    """
    registry = StateRegistry(capabilities)
    for value in ["b", "a", "b", "c", "a", "c", "b"]:
        registry.register_or_get(value)
    payloads = [state.payload for state in registry]
    assert payloads == ["b", "a", "c"]
    assert [state.index for state in registry] == [0, 1, 2]


def test_new_state_has_empty_transition_table(capabilities):
    """
    A freshly registered state starts without transitions.
    """
    registry = StateRegistry(capabilities)
    state = registry.register_or_get("A")
    assert state.transitions.is_empty
    assert state.transitions.total == 0


def test_registry_tracks_non_terminal_states(capabilities):
    """
    The registry counts states that can start a walk.
    """
    registry = StateRegistry(capabilities)
    registry.register_or_get("A")
    registry.register_or_get("B.")
    registry.register_or_get("C")
    registry.register_or_get("A")
    assert registry.non_terminal_count == 2


def test_find_returns_none_for_unknown_value(capabilities):
    """
    Looking up a value that was never registered misses.
    """
    registry = StateRegistry(capabilities)
    registry.register_or_get("A")
    assert registry.find("Z") is None
    assert registry.find("A") is registry[0]


def test_contains_rejects_states_from_other_registries(capabilities):
    """
    Membership is decided by state identity, not payload equality.
    """
    registry = StateRegistry(capabilities)
    other = StateRegistry(RecordingCapabilities())
    mine = registry.register_or_get("A")
    foreign = other.register_or_get("A")
    assert registry.contains(mine)
    assert not registry.contains(foreign)


@pytest.mark.parametrize("raise_error", [True, False])
def test_failed_copy_leaves_registry_unchanged(raise_error):
    """
    A failing duplicate raises an allocation error without appending a state.
    """
    capabilities = FailingCopyCapabilities(raise_error=raise_error)
    registry = StateRegistry(capabilities)
    registry.register_or_get("A")
    with pytest.raises(ChainAllocationError):
        registry.register_or_get("boom")
    assert [state.payload for state in registry] == ["A"]
    assert registry.non_terminal_count == 1
    assert registry.register_or_get("B").index == 1


def test_none_values_are_rejected(capabilities):
    """
    None is never a valid state value.
    """
    registry = StateRegistry(capabilities)
    with pytest.raises(ValueError):
        registry.register_or_get(None)


def test_release_all_releases_each_payload_once(capabilities):
    """
    Releasing the registry calls release once per state and empties it.
    """
    registry = StateRegistry(capabilities)
    for value in ["x", "y", "x", "z"]:
        registry.register_or_get(value)
    assert registry.release_all() == 3
    assert capabilities.released == ["x", "y", "z"]
    assert len(registry) == 0
    assert registry.release_all() == 0
    assert capabilities.released == ["x", "y", "z"]


class FailingTerminalCheckCapabilities(RecordingCapabilities):
    def is_terminal(self, value: str) -> bool:
        if value == "broken":
            raise RuntimeError("cannot classify")
        return super().is_terminal(value)


def test_failed_terminal_check_releases_copy():
    """
    A terminal check that raises releases the fresh copy and leaves the registry unchanged.
    """
    capabilities = FailingTerminalCheckCapabilities()
    registry = StateRegistry(capabilities)
    registry.register_or_get("A")
    with pytest.raises(RuntimeError, match="cannot classify"):
        registry.register_or_get("broken")
    assert capabilities.released == ["broken"]
    assert [state.payload for state in registry] == ["A"]
    assert registry.non_terminal_count == 1
    assert registry.register_or_get("B").index == 1
