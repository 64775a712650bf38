import enum

from .code import CODE_LEN, Code
from .utils import spaced


class Key(enum.Enum):

    EXACT_MATCH       = 'b' # black, right color in the right spot
    PRESENT_ELSEWHERE = 'w' # white, color is in the code somewhere else
    ABSENT            = ' ' # color isn't in the code

    def __str__(self):
        return self.value


class Score:
    """
    the CODE_LEN keys for a guess, lined up with the guess positions
    """

    __slots__ = ('_keys',)

    def __init__(self, keys):
        keys = tuple(keys)

        if len(keys) != CODE_LEN or not all(isinstance(k, Key) for k in keys):
            raise ValueError(f"a score is exactly {CODE_LEN} Keys, got: {keys!r}")

        object.__setattr__(self, '_keys', keys)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def keys(self):
        return self._keys

    @property
    def wins(self):
        return all(k is Key.EXACT_MATCH for k in self._keys)

    def __getitem__(self, i):
        return self._keys[i]

    def __iter__(self):
        return iter(self._keys)

    def __len__(self):
        return len(self._keys)

    def __eq__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self._keys == other._keys

    def __hash__(self):
        return hash(self._keys)

    def __str__(self):
        return spaced(self._keys)

    def __repr__(self):
        return f"Score({self._keys!r})"


def score(hidden, guess):
    """
    score guess against the hidden code

    NOTE: a color only has to be somewhere in hidden to count as present, it
    is never used up. so hidden 'rgbp' vs guess 'rrrr' is 'b w w w' and not
    'b' with three blanks like the board game.
    """
    if not isinstance(hidden, Code) or not isinstance(guess, Code):
        raise TypeError(f"can only score a Code against a Code, got: {hidden!r}, {guess!r}")

    keys = []

    for h, g in zip(hidden, guess):
        if g == h:
            keys.append(Key.EXACT_MATCH)
        elif g in hidden.set:
            keys.append(Key.PRESENT_ELSEWHERE)
        else:
            keys.append(Key.ABSENT)

    return Score(keys)
