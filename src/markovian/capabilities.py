"""
State capability interface for Markovian chains.

A chain knows nothing about the values it tracks. Everything it needs to know (identity,
copying, release, terminality and presentation) comes from a single capabilities object
supplied by the client domain.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any


class StateCapabilities(ABC):
    """
    Abstract interface describing how a chain treats its state values.

    :ivar domain_id: Identifier string for the client domain.
    :vartype domain_id: str
    """

    domain_id: str

    @abstractmethod
    def compare(self, first: Any, second: Any) -> int:
        """
        Three-way comparison of two state values.

        :param first: First state value.
        :type first: Any
        :param second: Second state value.
        :type second: Any
        :return: Zero when both values denote the same state, negative when the first orders
            before the second, positive otherwise.
        :rtype: int
        """
        raise NotImplementedError

    def duplicate(self, value: Any) -> Any:
        """
        Return an independent copy of a value for the chain to own.

        :param value: Client value being registered.
        :type value: Any
        :return: Copy owned by the chain. Returning ``None`` signals a failed copy.
        :rtype: Any
        """
        return copy.deepcopy(value)

    def release(self, value: Any) -> None:
        """
        Release a value previously produced by :meth:`duplicate`.

        :param value: Chain-owned value being torn down.
        :type value: Any
        :return: None.
        :rtype: None
        """
        return None

    @abstractmethod
    def is_terminal(self, value: Any) -> bool:
        """
        Report whether no further transition should be sampled after a value.

        :param value: State value.
        :type value: Any
        :return: True when the value ends a walk.
        :rtype: bool
        """
        raise NotImplementedError

    @abstractmethod
    def render(self, value: Any) -> None:
        """
        Present a value reached during a walk.

        :param value: State value.
        :type value: Any
        :return: None.
        :rtype: None
        """
        raise NotImplementedError
