"""
Snakes and ladders board chains.

Cells are numbered 1 to 100. A cell at the foot of a ladder or the head of a snake moves to its
destination with certainty; every other cell moves 1 to 6 cells forward with equal frequency.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO, Tuple

from ..capabilities import StateCapabilities
from ..chain import MarkovChain
from ..constants import BOARD_SIZE, DICE_MAX
from ..randomness import RandomSource

logger = logging.getLogger(__name__)

SHORTCUTS: Tuple[Tuple[int, int], ...] = (
    (13, 4),
    (85, 17),
    (95, 67),
    (97, 58),
    (66, 89),
    (87, 31),
    (57, 83),
    (91, 25),
    (28, 50),
    (35, 11),
    (8, 30),
    (41, 62),
    (81, 43),
    (69, 32),
    (20, 39),
    (33, 70),
    (79, 99),
    (23, 76),
    (15, 47),
    (61, 14),
)


@dataclass(frozen=True)
class Cell:
    """
    Board cell.

    :ivar number: Cell number, starting at 1.
    :vartype number: int
    :ivar ladder_to: Ladder destination, if the cell is the foot of a ladder.
    :vartype ladder_to: int or None
    :ivar snake_to: Snake destination, if the cell is the head of a snake.
    :vartype snake_to: int or None
    """

    number: int
    ladder_to: Optional[int] = None
    snake_to: Optional[int] = None

    @property
    def destination(self) -> Optional[int]:
        if self.ladder_to is not None:
            return self.ladder_to
        return self.snake_to


class BoardCapabilities(StateCapabilities):
    """
    Capabilities for board cells.

    :param stream: Optional output stream for rendering; defaults to the current standard output.
    :type stream: TextIO or None
    :param board_size: Number of the final cell.
    :type board_size: int
    """

    domain_id = "board"

    def __init__(self, stream: Optional[TextIO] = None, *, board_size: int = BOARD_SIZE) -> None:
        self._stream = stream
        self.board_size = board_size

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def compare(self, first: Cell, second: Cell) -> int:
        return first.number - second.number

    def is_terminal(self, value: Cell) -> bool:
        return value.number == self.board_size

    def render(self, value: Cell) -> None:
        if value.snake_to is not None:
            self.stream.write(f" [{value.number}] -snake to->")
        elif value.ladder_to is not None:
            self.stream.write(f" [{value.number}] -ladder to->")
        elif self.is_terminal(value):
            self.stream.write(f" [{value.number}]")
        else:
            self.stream.write(f" [{value.number}] ->")


def create_board(
    *, board_size: int = BOARD_SIZE, shortcuts: Sequence[Tuple[int, int]] = SHORTCUTS
) -> List[Cell]:
    """
    Create the board cells with their ladders and snakes.

    :param board_size: Number of cells.
    :type board_size: int
    :param shortcuts: ``(source, destination)`` pairs; a pair going up is a ladder.
    :type shortcuts: Sequence[tuple[int, int]]
    :return: Cells in board order.
    :rtype: list[Cell]
    :raises ValueError: If a shortcut leaves the board or starts on an occupied cell.
    """
    ladders = {}
    snakes = {}
    for source, destination in shortcuts:
        for number in (source, destination):
            if not 1 <= number <= board_size:
                raise ValueError(f"Shortcut cell {number} is outside the board (1..{board_size})")
        if source == destination:
            raise ValueError(f"Shortcut on cell {source} must move to another cell")
        if source in ladders or source in snakes:
            raise ValueError(f"Cell {source} already has a shortcut")
        if source < destination:
            ladders[source] = destination
        else:
            snakes[source] = destination
    return [
        Cell(number=number, ladder_to=ladders.get(number), snake_to=snakes.get(number))
        for number in range(1, board_size + 1)
    ]


def build_board_chain(
    *,
    capabilities: Optional[BoardCapabilities] = None,
    shortcuts: Sequence[Tuple[int, int]] = SHORTCUTS,
) -> MarkovChain:
    """
    Build the board chain.

    :param capabilities: Optional board capabilities (for a custom output stream or size).
    :type capabilities: BoardCapabilities or None
    :param shortcuts: Ladder and snake pairs.
    :type shortcuts: Sequence[tuple[int, int]]
    :return: Built chain whose first state is cell 1.
    :rtype: MarkovChain
    """
    capabilities = capabilities or BoardCapabilities()
    cells = create_board(board_size=capabilities.board_size, shortcuts=shortcuts)
    chain = MarkovChain(capabilities)
    states = [chain.add_state(cell) for cell in cells]
    for cell, state in zip(cells, states):
        destination = cell.destination
        if destination is not None:
            chain.add_transition(state, states[destination - 1])
            continue
        for roll in range(1, DICE_MAX + 1):
            index = cell.number + roll - 1
            if index >= len(states):
                break
            chain.add_transition(state, states[index])
    logger.info("Built board with %d cells and %d shortcuts", len(cells), len(shortcuts))
    return chain


def write_walks(
    chain: MarkovChain,
    *,
    count: int,
    max_length: int,
    rng: Optional[RandomSource] = None,
) -> None:
    """
    Generate and print walks that start on the first cell.

    :param chain: Built board chain.
    :type chain: MarkovChain
    :param count: Number of walks.
    :type count: int
    :param max_length: Maximum cells per walk.
    :type max_length: int
    :param rng: Optional injected random source.
    :type rng: RandomSource or None
    :return: None.
    :rtype: None
    """
    capabilities = chain.capabilities
    stream = capabilities.stream
    start = chain.registry[0]
    for number in range(1, count + 1):
        stream.write(f"Random Walk {number}: [{start.payload.number}] ->")
        chain.generate(start, max_length, rng=rng)
        stream.write("\n")
