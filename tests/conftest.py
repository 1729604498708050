# tests/conftest.py - shared fixtures

import pytest

from markov_walker.core.markov_chain import MarkovChain
from markov_walker.utils.logger_utils import Log

TABLE = ["a", "table", "and", "a", "chair"]
BANANA = ["a", "banana", "!", "and", "a", "banana", "?"]


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    """Keep log files out of the working tree."""
    monkeypatch.setattr(Log, "path", str(tmp_path / "logs" / "test.log"))
    monkeypatch.setattr(Log, "echo", False)
    return tmp_path / "logs" / "test.log"


@pytest.fixture
def example_chain():
    """Chain trained on the two illustrative sentences."""
    return MarkovChain([list(TABLE), list(BANANA)])
