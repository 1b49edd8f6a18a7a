# tests/conftest.py
import pytest

from romanparsec.Parsec import State, initial_pos


@pytest.fixture
def initial_state():
    def _make(input_data):
        return State(input_data, initial_pos("test"))

    return _make
