# markovwalk

Small Markov chains over arbitrary data, with weighted random walks.

The package has two programs that use the same chain:

- **snakes-and-ladders** walks a 100-cell board with fixed snakes and
  ladders. It rolls a six-sided die at each step.
- **tweets-generator** learns word-to-word transitions from a text file. It
  prints random "tweets" that end at a word ending in a period, or after
  20 words.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

### Snakes and ladders

```
snakes-and-ladders SEED NUM_WALKS
```

Every walk starts on cell 1. It runs until it reaches cell 100 or has
visited 60 cells. Ladder and snake moves are labelled, and a walk cut short
by the length limit ends with ` ->`. Each walk is followed by a blank line:

```
Random Walk 1: [1] -> [4] -> [8] -ladder to-> [30] -> ...
```

### Tweet generator

```
tweets-generator SEED NUM_TWEETS CORPUS_FILE [WORDS_TO_READ]
```

Words are separated by spaces, tabs and line breaks. Transitions are only
learned between words on the same line, and never out of a word that ends
with a period. `WORDS_TO_READ` limits how many words of the corpus are
learned from. It is capped at the number of words in the file. Without it,
the whole file is read. Each tweet starts at a random word that does not
end a sentence. The same seed gives the same output.

Both programs print a message and exit with status 1 in these cases:

- the wrong number of arguments;
- a number they cannot parse;
- a file that cannot be opened.

A `WORDS_TO_READ` of zero or less also makes the tweet generator exit with
status 1.

## Library use

```python
import random
from markovwalk.tweets import fill_database, new_chain, format_tweet

chain = new_chain()
fill_database(["the cat sat.", "the dog ran."], None, chain)

rng = random.Random(1)
start = chain.first_random_node(rng)
words = chain.random_sequence(start, 20, rng)
print(format_tweet(words, chain.is_truncated(words, 20)))
```

### `markovwalk.chain`

- `MarkovChain(is_last=None, key=None)` stores one `MarkovNode` per distinct
  state.
  - `is_last` marks terminal states.
  - `key` decides which states count as the same.
  - The chain supports `len()` and iterates in insertion order.
  - `add()` returns the existing node for a state, or appends a new one.
  - `get_node()` returns the node for a state, or `None` if there is none.
  - `first_random_node()` picks a random non-terminal node. It raises
    `ValueError` if every node is terminal.
  - `random_sequence()` walks from a node and returns the visited data.
  - `is_truncated()` tells whether a walk was cut short by its length limit.
- `MarkovNode.add_successor()` counts a transition.
- `MarkovNode.next_random()` picks a successor, weighted by how often each
  transition was counted.

Every random function takes an optional `random.Random`.

### `markovwalk.snakes`

- `create_board()` returns the board's `Cell` objects.
- `build_chain(board)` turns the board into a chain.
- `format_walk(cells, truncated)` renders a walk as shown above.

### `markovwalk.tweets`

- `new_chain()` returns an empty chain of words.
- `fill_database(lines, words_to_read, chain)` learns transitions from
  lines of text and returns the number of words it read. `words_to_read`
  may be `None`.
- `count_words(path)` counts the words in a file.
- `is_terminal_word(word)` tells whether a word ends with a period.
- `format_tweet(words, truncated)` renders a generated tweet.