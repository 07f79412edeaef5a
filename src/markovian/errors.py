"""
Error types for Markovian.
"""

from __future__ import annotations

from .constants import ALLOCATION_ERROR_MESSAGE


class ChainAllocationError(MemoryError):
    """
    Growth of the chain failed while adding a state or a transition.

    The registry or transition table that raised this error is left exactly as it was before
    the failing call, so everything committed earlier in the build remains usable.
    """

    def __init__(self, message: str = ALLOCATION_ERROR_MESSAGE) -> None:
        super().__init__(message)


class EmptyDomainError(RuntimeError):
    """
    A start state was requested but the registry holds no non-terminal state.

    :param state_count: Number of registered states at the time of the request.
    :type state_count: int
    """

    def __init__(self, *, state_count: int) -> None:
        self.state_count = state_count
        if state_count == 0:
            message = "Cannot pick a start state: the chain has no states"
        else:
            message = (
                "Cannot pick a start state: all registered states are terminal"
                f" (state_count={state_count})"
            )
        super().__init__(message)


class UnknownStateError(KeyError):
    """
    A transition endpoint is not a member of the chain's registry.
    """


class ChainClosedError(RuntimeError):
    """
    The chain was used after it was torn down.
    """
