"""
Pydantic models for Markovian runs and reports.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_TWEET_LENGTH, DEFAULT_WALK_LENGTH


class CorpusRunConfiguration(BaseModel):
    """
    Configuration for generating sentences from a text corpus.

    :ivar seed: Seed for the shared random source.
    :vartype seed: int
    :ivar count: Number of sentences to generate.
    :vartype count: int
    :ivar path: Path to the corpus text file.
    :vartype path: str
    :ivar word_limit: Optional number of leading tokens to read from the corpus.
    :vartype word_limit: int or None
    :ivar max_length: Maximum number of words per generated sentence.
    :vartype max_length: int
    """

    model_config = ConfigDict(extra="forbid")

    seed: int
    count: int = Field(ge=0)
    path: str = Field(min_length=1)
    word_limit: Optional[int] = Field(default=None, ge=1)
    max_length: int = Field(default=DEFAULT_TWEET_LENGTH, ge=2)


class BoardRunConfiguration(BaseModel):
    """
    Configuration for generating walks over the snakes and ladders board.

    :ivar seed: Seed for the shared random source.
    :vartype seed: int
    :ivar count: Number of walks to generate.
    :vartype count: int
    :ivar max_length: Maximum number of cells per walk.
    :vartype max_length: int
    """

    model_config = ConfigDict(extra="forbid")

    seed: int
    count: int = Field(ge=0)
    max_length: int = Field(default=DEFAULT_WALK_LENGTH, ge=2)


class ChainSummary(BaseModel):
    """
    Structural statistics for a built chain.

    :ivar domain_id: Identifier of the client domain.
    :vartype domain_id: str
    :ivar state_count: Number of distinct states.
    :vartype state_count: int
    :ivar terminal_state_count: Number of terminal states.
    :vartype terminal_state_count: int
    :ivar transition_count: Number of distinct (source, target) transitions.
    :vartype transition_count: int
    :ivar observed_transitions: Sum of all transition counts.
    :vartype observed_transitions: int
    :ivar dead_end_count: Non-terminal states without outgoing transitions.
    :vartype dead_end_count: int
    :ivar max_out_degree: Largest number of distinct targets for one state.
    :vartype max_out_degree: int
    :ivar mean_out_degree: Mean number of distinct targets per state.
    :vartype mean_out_degree: float
    """

    model_config = ConfigDict(extra="forbid")

    domain_id: str
    state_count: int = Field(ge=0)
    terminal_state_count: int = Field(ge=0)
    transition_count: int = Field(ge=0)
    observed_transitions: int = Field(ge=0)
    dead_end_count: int = Field(ge=0)
    max_out_degree: int = Field(ge=0)
    mean_out_degree: float = Field(ge=0.0)
