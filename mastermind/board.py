import enum

from blinker import signal

from .score import score

import logging
logger = logging.getLogger()


class Signals:
    """
    blinker signals sent by a Board, the board is the sender
    handlers must accept 'round' as keyword
    """

    round_recorded = signal('round-recorded')
    game_won       = signal('game-won')

signals = Signals()


class GameOver(RuntimeError):
    pass


class State(enum.Enum):
    IN_PROGRESS = 'in_progress'
    WON         = 'won'


class Round:
    """
    a guess and the score it got, never changes once made
    """

    __slots__ = ('_guess', '_score')

    def __init__(self, guess, score):
        object.__setattr__(self, '_guess', guess)
        object.__setattr__(self, '_score', score)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def guess(self):
        return self._guess

    @property
    def score(self):
        return self._score

    @property
    def wins(self):
        return self._score.wins

    def __eq__(self, other):
        if not isinstance(other, Round):
            return NotImplemented
        return (self._guess, self._score) == (other._guess, other._score)

    def __hash__(self):
        return hash((self._guess, self._score))

    def __str__(self):
        return f"{self._guess} - {self._score}"

    def __repr__(self):
        return f"Round({self._guess!r}, {self._score!r})"


class Board:
    """
    the hidden code and every round played against it

    IN_PROGRESS -> WON on the first winning round, there is no way back out
    of WON and submit() refuses any more guesses.
    """

    def __init__(self, hidden_code):
        self._hidden_code = hidden_code
        self._rounds = []
        self._state = State.IN_PROGRESS

    @property
    def hidden_code(self):
        return self._hidden_code

    @property
    def rounds(self):
        return tuple(self._rounds)

    @property
    def last_round(self):
        return self._rounds[-1] if self._rounds else None

    @property
    def state(self):
        return self._state

    @property
    def in_progress(self):
        return self._state is State.IN_PROGRESS

    @property
    def won(self):
        return self._state is State.WON

    def submit(self, guess):
        """
        score guess, record the round and return (score, wins)
        """
        if self.won:
            raise GameOver(f"game is already won in {len(self._rounds)} rounds")

        round = Round(guess, score(self._hidden_code, guess))
        self._rounds.append(round)
        logger.debug(f"round {len(self._rounds)}: {round}")

        if round.wins:
            self._state = State.WON
            logger.debug(f"won in {len(self._rounds)} rounds")

        signals.round_recorded.send(self, round=round)
        if self.won:
            signals.game_won.send(self, round=round)

        return round.score, round.wins

    def __str__(self):
        return '\n'.join([str(round) for round in self._rounds])
