"""The Letter Boxed board: twelve letters, three on each side of a square.

Positions are numbered clockwise starting from the left end of the top side:

     0   1   2
   ┌───────────┐
11 │           │ 3
10 │           │ 4
 9 │           │ 5
   └───────────┘
     8   7   6

Two letters are illegal neighbors if they share a side, i.e. if
position // 3 is the same for both.
"""

from dataclasses import dataclass, field
from typing import Iterable, Self

NUM_SIDES = 4
SIDE_LEN = 3
NUM_LETTERS = NUM_SIDES * SIDE_LEN

INNER_WIDTH = 11


class InvalidBoardError(ValueError):
    """The input did not contain exactly twelve letters."""


class UnknownLetterError(KeyError):
    """A position lookup for a letter that isn't on the board."""


@dataclass(frozen=True)
class Board:
    letters: tuple[str, ...]
    _positions: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.letters) != NUM_LETTERS:
            raise InvalidBoardError(
                f"Board must have {NUM_LETTERS} letters, got {len(self.letters)}: "
                + "".join(self.letters)
            )
        positions = {}
        for i, let in enumerate(self.letters):
            # duplicates resolve to the first occurrence
            positions.setdefault(let, i)
        object.__setattr__(self, "_positions", positions)

    @staticmethod
    def from_letters(chars: Iterable[str]) -> Self:
        """Read the board clockwise, skipping blanks."""
        return Board(tuple(c.lower() for c in chars if not c.isspace()))

    def position_of(self, letter: str) -> int:
        try:
            return self._positions[letter]
        except KeyError:
            raise UnknownLetterError(letter) from None

    def side_of(self, letter: str) -> int:
        return self.position_of(letter) // SIDE_LEN

    def has_letter(self, letter: str) -> bool:
        return letter in self._positions

    def sides(self) -> list[str]:
        return [
            "".join(self.letters[i : i + SIDE_LEN])
            for i in range(0, NUM_LETTERS, SIDE_LEN)
        ]

    def can_spell(self, word: str) -> bool:
        """Is every letter on the board, with no two consecutive letters on one side?"""
        if not all(self.has_letter(c) for c in word):
            return False
        sides = [self.side_of(c) for c in word]
        return all(a != b for a, b in zip(sides, sides[1:]))

    def mask_of(self, word: str) -> int:
        """Bit mask of the board positions used by word."""
        mask = 0
        for c in word:
            mask |= 1 << self.position_of(c)
        return mask

    def render(self) -> str:
        top, right, bottom, left = self.sides()

        def letter_row(lets):
            return "     " + "   ".join(lets)

        lines = [
            letter_row(top),
            "   ┌" + "─" * INNER_WIDTH + "┐",
        ]
        for l, r in zip(reversed(left), right):
            lines.append(f" {l} │{' ' * INNER_WIDTH}│ {r}")
        lines.append("   └" + "─" * INNER_WIDTH + "┘")
        lines.append(letter_row(reversed(bottom)))
        return "\n".join(lines)

    def __str__(self):
        return "".join(self.letters)
