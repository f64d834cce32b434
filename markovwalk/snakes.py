"""Snakes and ladders as a Markov chain, with random walks over the board."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .chain import MarkovChain

BOARD_SIZE = 100
MAX_GENERATION_LENGTH = 60
DICE_MAX = 6
NUM_ARGS_ERROR = "Usage: invalid number of arguments"

# Each pair (a, b) is a ladder from a to b when a < b, and a snake otherwise.
TRANSITIONS: tuple[tuple[int, int], ...] = (
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

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_NUMBER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


@dataclass(frozen=True)
class Cell:
    """A square of the board and where a ladder or snake on it leads."""

    number: int
    ladder_to: int | None = None
    snake_to: int | None = None


def _parse_long(text: str) -> int:
    """Parse a base-10 integer, raising ValueError with a user-facing message."""
    match = _NUMBER.match(text)
    if match:
        value = int(match.group())
        rest = text[match.end():]
    else:
        value, rest = 0, text
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise ValueError("Error: Value out of range.")
    if rest:
        raise ValueError(f"Error: Invalid character '{rest[0]}' found in input.")
    return value


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _is_final(cell: Cell) -> bool:
    return cell.number == BOARD_SIZE


def _cell_number(cell: Cell) -> int:
    return cell.number


def create_board() -> list[Cell]:
    """Return the cells 1..BOARD_SIZE with their ladders and snakes."""
    ladders = {start: end for start, end in TRANSITIONS if start < end}
    snakes = {start: end for start, end in TRANSITIONS if start > end}
    return [
        Cell(number, ladders.get(number), snakes.get(number))
        for number in range(1, BOARD_SIZE + 1)
    ]


def build_chain(board: Sequence[Cell]) -> MarkovChain:
    """Build the chain of moves: a ladder or snake, or one of the dice rolls."""
    chain = MarkovChain(is_last=_is_final, key=_cell_number)
    for cell in board:
        chain.add(cell)
    for cell in board:
        node = chain.add(cell)
        target = cell.ladder_to if cell.ladder_to is not None else cell.snake_to
        if target is not None:
            node.add_successor(chain.add(board[target - 1]))
            continue
        for roll in range(1, DICE_MAX + 1):
            index = cell.number + roll - 1
            if index >= BOARD_SIZE:
                break
            node.add_successor(chain.add(board[index]))
    return chain


def format_walk(cells: Sequence[Cell], truncated: bool) -> str:
    """Render a walk, marking ladder and snake moves."""
    parts: list[str] = []
    previous: Cell | None = None
    for cell in cells:
        if previous is None:
            parts.append(f"[{cell.number}]")
        elif previous.ladder_to == cell.number:
            parts.append(f" -ladder to-> [{cell.number}]")
        elif previous.snake_to == cell.number:
            parts.append(f" -snake to-> [{cell.number}]")
        else:
            parts.append(f" -> [{cell.number}]")
        previous = cell
    text = "".join(parts)
    return text + " ->" if truncated else text


def main(argv: Sequence[str] | None = None) -> int:
    """Print random walks over the board: arguments are a seed and a count."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(NUM_ARGS_ERROR)
        return 1
    try:
        seed = _parse_long(args[0])
        num_paths = _to_int32(_parse_long(args[1]))
    except ValueError as error:
        print(error)
        return 1

    rng = random.Random(seed & 0xFFFFFFFF)
    chain = build_chain(create_board())
    start = next(iter(chain))
    for index in range(num_paths):
        walk = chain.random_sequence(start, MAX_GENERATION_LENGTH, rng)
        truncated = chain.is_truncated(walk, MAX_GENERATION_LENGTH)
        print(f"Random Walk {index + 1}: {format_walk(walk, truncated)}")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())