import enum

from .utils import spaced

import logging
logger = logging.getLogger()

CODE_LEN = 4


class Color(enum.Enum):

    RED    = 'r'
    GREEN  = 'g'
    BLUE   = 'b'
    PURPLE = 'p'

    def __str__(self):
        return self.value

    @classmethod
    def from_char(cls, c):
        """
        return the Color for c or None if c isn't one of ours
        """
        try:
            return cls(c)
        except ValueError:
            return None


class ParseError(ValueError):

    reason = "invalid code"

    def __init__(self, text, count):
        self.text = text
        self.count = count
        super().__init__(f"{self.reason}: {text.strip()!r} has {count} of {CODE_LEN} colors")


class TooFewSymbols(ParseError):
    reason = "not enough characters"


class TooManySymbols(ParseError):
    reason = "too many characters"


class Code:
    """
    an immutable row of CODE_LEN colors

    code.positional is the colors in order, code.set is the distinct
    colors anywhere in the row. both are built together and never change.
    """

    __slots__ = ('_positional', '_set')

    def __init__(self, colors):
        positional = tuple(colors)

        if not all(isinstance(c, Color) for c in positional):
            raise TypeError(f"a code is made of Colors, got: {positional!r}")

        text = ''.join([str(c) for c in positional])
        if len(positional) < CODE_LEN:
            raise TooFewSymbols(text, len(positional))
        if len(positional) > CODE_LEN:
            raise TooManySymbols(text, len(positional))

        object.__setattr__(self, '_positional', positional)
        object.__setattr__(self, '_set', frozenset(positional))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def parse(cls, text):
        """
        build a Code from text like 'rgbp' or '(r,g,b,p)'

        anything that isn't a color character is dropped, including the
        ( ) , decorations, so 'rxgybzp' is also 'r g b p'.
        """
        colors = [
            color for color in map(Color.from_char, text)
            if color is not None
        ]

        if len(colors) < CODE_LEN:
            raise TooFewSymbols(text, len(colors))
        if len(colors) > CODE_LEN:
            raise TooManySymbols(text, len(colors))

        code = cls(colors)
        logger.debug(f"parsed {text.strip()!r} as {code}")
        return code

    @property
    def positional(self):
        return self._positional

    @property
    def set(self):
        """distinct colors that appear anywhere in the code"""
        return self._set

    def __getitem__(self, i):
        return self._positional[i]

    def __iter__(self):
        return iter(self._positional)

    def __len__(self):
        return len(self._positional)

    def __eq__(self, other):
        if not isinstance(other, Code):
            return NotImplemented
        return self._positional == other._positional

    def __hash__(self):
        return hash(self._positional)

    def __str__(self):
        return spaced(self._positional)

    def __repr__(self):
        return f"Code.parse({''.join([str(c) for c in self._positional])!r})"
