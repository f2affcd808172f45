"""
Shared pytest fixtures for lexicon tests.
"""

import pytest

from bst_lexicon import Lexicon, set_reporting


@pytest.fixture
def lexicon():
    """Provide a fresh, empty Lexicon."""
    return Lexicon()


@pytest.fixture
def quiet_reports():
    """Suppress invariant reports while a test builds malformed trees."""
    set_reporting(False)
    yield
    set_reporting(True)


@pytest.fixture
def words():
    """Provide an unsorted list of distinct words."""
    return ["ant", "but", "he", "one", "other", "our", "no", "time", "up", "use"]


@pytest.fixture
def prefix_words():
    """Provide words sharing the 'la' prefix."""
    return [
        "landlord", "landfill", "label", "lady", "last", "lake",
        "land", "landing", "labor", "lamp", "lane", "large",
    ]
