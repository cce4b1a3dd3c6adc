import pytest

from roget.words import build_dictionary, build_frequency_table


WORDS = [
    "crane", "slate", "trace", "crate", "react", "hello", "world", "moved",
    "which", "there", "about", "other", "abbey", "kebab", "those", "geese",
]

COUNTS = [
    ("crane", 120), ("slate", 300), ("trace", 900), ("crate", 150),
    ("react", 700), ("hello", 2000), ("world", 5000), ("moved", 1100),
    ("which", 9000), ("there", 8000), ("about", 7000), ("other", 6000),
    ("abbey", 40), ("kebab", 15), ("those", 4000), ("geese", 90),
]


@pytest.fixture
def dictionary():
    return build_dictionary(WORDS)


@pytest.fixture
def frequencies():
    return build_frequency_table(COUNTS)
