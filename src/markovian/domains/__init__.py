"""
Client domain registry for Markovian.
"""

from __future__ import annotations

from typing import Dict, Optional, TextIO, Type

from ..capabilities import StateCapabilities


def available_domains() -> Dict[str, Type[StateCapabilities]]:
    """
    Return the registered client domains.

    :return: Mapping of domain identifiers to capability classes.
    :rtype: dict[str, Type[StateCapabilities]]
    """
    from .board import BoardCapabilities
    from .words import WordCapabilities

    return {
        WordCapabilities.domain_id: WordCapabilities,
        BoardCapabilities.domain_id: BoardCapabilities,
    }


def get_domain(domain_id: str, *, stream: Optional[TextIO] = None) -> StateCapabilities:
    """
    Instantiate the capabilities of a client domain by identifier.

    :param domain_id: Domain identifier.
    :type domain_id: str
    :param stream: Optional output stream for rendering.
    :type stream: TextIO or None
    :return: Capabilities instance.
    :rtype: StateCapabilities
    :raises KeyError: If the domain identifier is unknown.
    """
    registry = available_domains()
    domain_class = registry.get(domain_id)
    if domain_class is None:
        known = ", ".join(sorted(registry))
        raise KeyError(f"Unknown domain '{domain_id}'. Known domains: {known}")
    return domain_class(stream=stream)
