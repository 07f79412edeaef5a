"""
Markovian public package interface.
"""

from .capabilities import StateCapabilities
from .chain import (
    MarkovChain,
    State,
    StateRegistry,
    TransitionEntry,
    TransitionTable,
    generate,
    pick_start,
    record_transition,
    weighted_pick,
)
from .errors import ChainAllocationError, ChainClosedError, EmptyDomainError, UnknownStateError
from .models import BoardRunConfiguration, ChainSummary, CorpusRunConfiguration
from .randomness import RandomSource, get_random, seed_random

__all__ = [
    "__version__",
    "BoardRunConfiguration",
    "ChainAllocationError",
    "ChainClosedError",
    "ChainSummary",
    "CorpusRunConfiguration",
    "EmptyDomainError",
    "MarkovChain",
    "RandomSource",
    "State",
    "StateCapabilities",
    "StateRegistry",
    "TransitionEntry",
    "TransitionTable",
    "UnknownStateError",
    "generate",
    "get_random",
    "pick_start",
    "record_transition",
    "seed_random",
    "weighted_pick",
]

__version__ = "1.0.0"
