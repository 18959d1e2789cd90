import pytest
from inline_snapshot import snapshot

from letterboxed.board import Board, InvalidBoardError, UnknownLetterError


def test_from_letters():
    b = Board.from_letters("abcdefghi jkl ")
    assert b.letters == tuple("abcdefghijkl")
    for i, let in enumerate("abcdefghijkl"):
        assert b.position_of(let) == i
        assert b.side_of(let) == i // 3
    assert str(b) == "abcdefghijkl"


def test_from_letters_lowercases():
    b = Board.from_letters("VKS PYI ELU RAO")
    assert str(b) == "vkspyielurao"


def test_duplicate_letters():
    b = Board.from_letters("a" * 12)
    assert b.letters == ("a",) * 12
    assert b.position_of("a") == 0


@pytest.mark.parametrize(
    "letters",
    ["abcdefg", "abcdefghi", "abcdefghij", "abcdefghijk", "abcdefghijklm", "", "abc def"],
)
def test_invalid_board(letters: str):
    with pytest.raises(InvalidBoardError):
        Board.from_letters(letters)


def test_unknown_letter():
    b = Board.from_letters("abcdefghijkl")
    with pytest.raises(UnknownLetterError):
        b.position_of("z")
    with pytest.raises(KeyError):
        b.side_of("z")
    assert not b.has_letter("z")


def test_sides():
    b = Board.from_letters("vkspyielurao")
    assert b.sides() == ["vks", "pyi", "elu", "rao"]


def test_can_spell():
    b = Board.from_letters("abc def ghi jkl")
    assert b.can_spell("adg")
    assert b.can_spell("bkfg")
    assert not b.can_spell("agh")  # g and h share a side
    assert not b.can_spell("adz")  # z isn't on the board
    assert b.can_spell("a")


def test_mask_of():
    b = Board.from_letters("abc def ghi jkl")
    assert b.mask_of("") == 0
    assert b.mask_of("adg") == 0b1001001
    assert b.mask_of("ada") == 0b1001


def test_render():
    b = Board.from_letters("abc def ghi jkl")
    assert b.render() == snapshot(
        """\
     a   b   c
   ┌───────────┐
 l │           │ d
 k │           │ e
 j │           │ f
   └───────────┘
     i   h   g\
"""
    )
