"""
Markov chain engine: state registry, transition tables and random walks.
"""

from __future__ import annotations

from .markov import MarkovChain
from .registry import State, StateRegistry
from .transitions import TransitionEntry, TransitionTable, record_transition, weighted_pick
from .walk import generate, next_state, pick_start

__all__ = [
    "MarkovChain",
    "State",
    "StateRegistry",
    "TransitionEntry",
    "TransitionTable",
    "generate",
    "next_state",
    "pick_start",
    "record_transition",
    "weighted_pick",
]
