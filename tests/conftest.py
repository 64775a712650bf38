"""
Shared fixtures.
- hidden: the 'r g b p' code most scenarios play against
- board: a fresh Board hiding it
"""

import pytest

from mastermind.board import Board
from mastermind.code import Code

@pytest.fixture
def hidden():
    return Code.parse("rgbp")

@pytest.fixture
def board(hidden):
    return Board(hidden)
