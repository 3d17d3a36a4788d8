import random

import pytest

from spacecraze.app import configure
from spacecraze.util import random_int

LIMIT = 1_000_000


def sample():
    return [random_int(0, LIMIT) for _ in range(3)]


def test_seed_makes_sequence_repeatable(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("seed=42\n", encoding="utf-8")
    configure(path)
    first = sample()
    configure(path)
    second = sample()
    assert first == second
    assert all(0 <= value <= LIMIT for value in first)


def test_different_seeds_give_different_sequences(tmp_path):
    one = tmp_path / "one.txt"
    two = tmp_path / "two.txt"
    one.write_text("seed=1\n", encoding="utf-8")
    two.write_text("seed=2\n", encoding="utf-8")
    configure(one)
    first = sample()
    configure(two)
    second = sample()
    assert first != second
    assert len(first) == len(second) == 3


def test_seed_with_trailing_text(tmp_path):
    plain = tmp_path / "plain.txt"
    padded = tmp_path / "padded.txt"
    plain.write_text("seed=7\n", encoding="utf-8")
    padded.write_text("seed=7  \n", encoding="utf-8")
    configure(plain)
    first = sample()
    configure(padded)
    assert sample() == first


def test_missing_file_leaves_random_state(tmp_path):
    random.seed(3)
    expected = sample()
    random.seed(3)
    configure(tmp_path / "missing.txt")
    assert sample() == expected


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("fps=30\nvolume=2\n", encoding="utf-8")
    random.seed(5)
    expected = sample()
    random.seed(5)
    configure(path)
    assert sample() == expected


def test_bare_seed_reseeds(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("seed\n", encoding="utf-8")
    random.seed(5)
    expected = sample()
    random.seed(5)
    configure(path)
    after = sample()
    assert after != expected
    assert all(0 <= value <= LIMIT for value in after)


def test_invalid_seed_raises(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("seed=abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        configure(path)