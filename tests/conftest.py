import io
from pathlib import Path

import pytest

from sentencer.common.console import Console


DATA_DIR = Path(__file__).parent / "data"


class DictProvider:
    """In-memory provider that records every lookup."""

    def __init__(self, data):
        self.data = data
        self.calls = []

    def get_sentences(self, word):
        self.calls.append(word)
        return list(self.data.get(word, []))


def scripted_console(*answers):
    """Console whose stdin yields the given answers, one per line."""
    stdin = io.StringIO("".join(a + "\n" for a in answers))
    return Console(stdin=stdin, stdout=io.StringIO())


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def make_console():
    return scripted_console


@pytest.fixture
def dict_provider():
    return DictProvider
