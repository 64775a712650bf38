__version__ = '0.1.0'

from .code import Color, Code, ParseError, TooFewSymbols, TooManySymbols, CODE_LEN
from .score import Key, Score, score
from .board import Board, Round, State, GameOver, signals
