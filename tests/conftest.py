"""Pytest configuration and fixtures."""

import pytest

from strongpw import DictionaryIndex, PasswordEvaluator, seed_everything


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    seed_everything(42)
    yield


@pytest.fixture
def small_dictionary():
    """The three-word dictionary used by the end-to-end scenarios."""
    return {"account": 1, "password": 2, "dragon": 3}


@pytest.fixture
def small_index(small_dictionary):
    return DictionaryIndex(small_dictionary)


@pytest.fixture
def evaluator(small_index):
    return PasswordEvaluator(small_index)


@pytest.fixture
def wordlist_file(tmp_path):
    """A short word list file with a blank line and a duplicate."""
    path = tmp_path / "words.txt"
    path.write_text("account\n  password \n\ndragon\nmonkey\naccount\n")
    return path
