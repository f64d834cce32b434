"""Generate random sentences from a word-level Markov chain of a text file."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Iterable, Sequence

from .chain import MarkovChain

FILE_PATH_ERROR = "Error: incorrect file path"
NUM_ARGS_ERROR = "Usage: invalid number of arguments"
MAX_TWEET_LENGTH = 20

_DELIMITERS = re.compile(r"[ \n\t\r]+")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_NUMBER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


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


def _words(line: str) -> list[str]:
    return [word for word in _DELIMITERS.split(line) if word]


def is_terminal_word(word: str | None) -> bool:
    """Tell whether a word ends a sentence, that is, ends with a period."""
    return bool(word) and word.endswith(".")


def count_words(path: str) -> int:
    """Count the words in a file; raises OSError if it cannot be read."""
    with open(path, encoding="utf-8") as handle:
        return sum(len(_words(line)) for line in handle)


def fill_database(
    lines: Iterable[str], words_to_read: int | None, chain: MarkovChain
) -> int:
    """Feed words into the chain, line by line, and return how many were read.

    Transitions never cross a line break nor leave a terminal word.
    ``words_to_read`` of None reads everything.
    """
    processed = 0
    for line in lines:
        previous = None
        for word in _words(line):
            if words_to_read is not None and processed >= words_to_read:
                break
            node = chain.add(word)
            if previous is not None and not chain.is_last(previous.data):
                previous.add_successor(node)
            previous = node
            processed += 1
        if words_to_read is not None and processed >= words_to_read:
            break
    return processed


def new_chain() -> MarkovChain:
    """Return an empty chain of words, terminal at words ending with a period."""
    return MarkovChain(is_last=is_terminal_word)


def format_tweet(words: Sequence[str], truncated: bool) -> str:
    """Render generated words, each followed by a space."""
    text = "".join(f"{word} " for word in words)
    return text + " ->" if truncated else text


def main(argv: Sequence[str] | None = None) -> int:
    """Arguments: seed, number of tweets, text file, optional word limit."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 3 <= len(args) <= 4:
        print(NUM_ARGS_ERROR)
        return 1
    try:
        seed = _parse_long(args[0])
        num_tweets = _to_int32(_parse_long(args[1]))
    except ValueError as error:
        print(error)
        return 1

    path = args[2]
    try:
        total_words: int | None = count_words(path)
    except OSError:
        print(FILE_PATH_ERROR)
        total_words = None

    max_words: int | None = None
    if len(args) == 4:
        try:
            max_words = _to_int32(_parse_long(args[3]))
        except ValueError as error:
            print(error)
            return 1
        if max_words <= 0:
            return 1
        if total_words is not None:
            max_words = min(max_words, total_words)

    chain = new_chain()
    try:
        with open(path, encoding="utf-8") as handle:
            fill_database(handle, max_words, chain)
    except OSError:
        print("Unable to open file.")
        return 1

    rng = random.Random(seed & 0xFFFFFFFF)
    for number in range(1, num_tweets + 1):
        try:
            first = chain.first_random_node(rng)
        except ValueError:
            first = None
        if first is None:
            print("Unable to get first node.")
            return 1
        words = chain.random_sequence(first, MAX_TWEET_LENGTH, rng)
        truncated = chain.is_truncated(words, MAX_TWEET_LENGTH)
        print(f"Tweet {number}: {format_tweet(words, truncated)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())