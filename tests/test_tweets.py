import pytest

from markovwalk.tweets import (
    FILE_PATH_ERROR,
    NUM_ARGS_ERROR,
    count_words,
    fill_database,
    format_tweet,
    is_terminal_word,
    main,
    new_chain,
)

TEXT = "the cat sat.\nthe dog ran.\n"


def _successors(chain, word):
    return {node.data: count for node, count in chain.get_node(word).frequencies.items()}


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(TEXT, encoding="utf-8")
    return str(path)


@pytest.mark.parametrize(
    "word, expected",
    [("end.", True), ("end", False), ("", False), (None, False), ("a.b", False)],
)
def test_is_terminal_word(word, expected):
    assert is_terminal_word(word) is expected


def test_count_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("a b\tc\n  d.\r\n\n", encoding="utf-8")
    assert count_words(str(path)) == 4


def test_count_words_missing_file(tmp_path):
    with pytest.raises(OSError):
        count_words(str(tmp_path / "missing.txt"))


def test_fill_database_counts_transitions():
    chain = new_chain()
    assert fill_database(["a b a c."], None, chain) == 4
    assert [node.data for node in chain] == ["a", "b", "c."]
    assert _successors(chain, "a") == {"b": 1, "c.": 1}
    assert _successors(chain, "b") == {"a": 1}
    assert _successors(chain, "c.") == {}


def test_fill_database_repeated_transition_counts_up():
    chain = new_chain()
    fill_database(["x y x y."], None, chain)
    assert _successors(chain, "x") == {"y": 1, "y.": 1}
    assert _successors(chain, "y") == {"x": 1}


def test_fill_database_does_not_cross_lines():
    chain = new_chain()
    fill_database(["a b\n", "c d.\n"], None, chain)
    assert _successors(chain, "b") == {}
    assert _successors(chain, "c") == {"d.": 1}


def test_fill_database_terminal_word_has_no_successors():
    chain = new_chain()
    fill_database(["x. y"], None, chain)
    assert _successors(chain, "x.") == {}
    assert len(chain) == 2


def test_fill_database_respects_limit():
    chain = new_chain()
    assert fill_database(["a b", "c d"], 3, chain) == 3
    assert [node.data for node in chain] == ["a", "b", "c"]


def test_format_tweet():
    assert format_tweet(["hi", "there."], False) == "hi there. "
    assert format_tweet(["hi", "there"], True) == "hi there  ->"
    assert format_tweet([], False) == ""


def test_main_wrong_argument_count(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out == NUM_ARGS_ERROR + "\n"


def test_main_invalid_character(capsys, corpus):
    assert main(["1", "3z", corpus]) == 1
    assert capsys.readouterr().out == "Error: Invalid character 'z' found in input.\n"


def test_main_missing_file(capsys, tmp_path):
    assert main(["1", "1", str(tmp_path / "nope.txt")]) == 1
    out = capsys.readouterr().out
    assert out.startswith(FILE_PATH_ERROR + "\n")
    assert "Unable to open file." in out


def test_main_rejects_non_positive_limit(corpus):
    assert main(["1", "1", corpus, "0"]) == 1


def test_main_generates_sentences(capsys, corpus):
    assert main(["7", "3", corpus]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    vocabulary = set(TEXT.split())
    for number, line in enumerate(lines, start=1):
        prefix = f"Tweet {number}: "
        assert line.startswith(prefix)
        words = line[len(prefix):].split()
        assert set(words) <= vocabulary
        assert words[-1].endswith(".")
        assert not words[0].endswith(".")


def test_main_with_limit_uses_only_first_words(capsys, corpus):
    assert main(["2", "4", corpus, "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    for number, line in enumerate(lines, start=1):
        prefix = f"Tweet {number}: "
        assert line.startswith(prefix)
        assert set(line[len(prefix):].split()) <= {"the", "cat"}


def test_main_empty_file_fails(capsys, tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert main(["1", "1", str(path)]) == 1
    assert capsys.readouterr().out.endswith("Unable to get first node.\n")


def test_main_is_deterministic_per_seed(capsys, corpus):
    main(["11", "5", corpus])
    first = capsys.readouterr().out
    main(["11", "5", corpus])
    assert capsys.readouterr().out == first