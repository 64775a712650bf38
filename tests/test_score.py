"""
Testing the scoring rule.
"""

import itertools

import pytest

from mastermind.code import Code, Color
from mastermind.score import Key, Score, score

B = Key.EXACT_MATCH
W = Key.PRESENT_ELSEWHERE
_ = Key.ABSENT

def test_exact_match_always_wins():
    for colors in itertools.product(Color, repeat=4):
        code = Code(colors)
        result = score(code, code)
        assert result.wins
        assert result.keys == (B, B, B, B)

def test_repeats_are_not_used_up():
    # only one red in hidden, but every red in the guess sees it
    result = score(Code.parse("rgbp"), Code.parse("rrrr"))
    assert result.keys == (B, W, W, W)
    assert not result.wins

def test_present_everywhere():
    result = score(Code.parse("rgbp"), Code.parse("pppp"))
    assert result.keys == (W, W, W, B)

def test_present_all_misplaced():
    result = score(Code.parse("rgbp"), Code.parse("pbgr"))
    assert result.keys == (W, W, W, W)

def test_absent():
    hidden = Code.parse("rrgg")
    result = score(hidden, Code.parse("rbgp"))
    assert result.keys == (B, _, B, _)

def test_score_is_per_position_of_guess():
    hidden = Code.parse("rrrr")
    result = score(hidden, Code.parse("grbr"))
    assert result.keys == (_, B, _, B)

def test_score_str():
    result = score(Code.parse("rrgg"), Code.parse("rgbp"))
    assert str(result) == "b w    "
    assert str(Score([B, B, B, B])) == "b b b b"

def test_score_equality():
    assert score(Code.parse("rgbp"), Code.parse("rrrr")) == Score([B, W, W, W])

def test_score_is_immutable():
    result = score(Code.parse("rgbp"), Code.parse("rrrr"))

    with pytest.raises(AttributeError):
        result._keys = (B, B, B, B)
    with pytest.raises(AttributeError):
        del result._keys

    assert result.keys == (B, W, W, W)
    assert not result.wins

def test_score_only_takes_codes():
    code = Code.parse("rgbp")

    with pytest.raises(TypeError):
        score(code, "rgbp")
    with pytest.raises(TypeError):
        score([Color.RED] * 4, code)
