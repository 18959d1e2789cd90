"""Best-first search for a short chain of words that covers the whole board.

Each state in the search is a partial solution: the words chosen so far,
summarized by the last word and the set of board positions it has covered.
Every generated state goes into an append-only table along with the index of
the state it came from. That table is the search tree; the answer is read off
it by following parent indices back to the start state.
"""

import dataclasses
import heapq
import time
from dataclasses import dataclass
from typing import Callable, Iterator

from letterboxed.board import NUM_LETTERS, Board
from letterboxed.trie import Trie

ALL_COVERED = (1 << NUM_LETTERS) - 1
MAX_WORDS = 5


@dataclass(frozen=True)
class State:
    word: str
    """The word that was just played ("" for the start state)."""
    num_words: int
    covered: int
    """Bit mask of the board positions used so far."""
    location: int | None
    """Board position of the last letter played, None at the start."""
    num_letters: int
    """Total letters in all the words so far."""

    def num_covered(self):
        return self.covered.bit_count()

    def is_goal(self):
        return self.covered == ALL_COVERED


START = State(word="", num_words=0, covered=0, location=None, num_letters=0)


def score_by_letters(state: State) -> float:
    return state.num_covered() / (1 + state.num_letters)


def score_by_words(state: State) -> float:
    return state.num_covered() / (1 + state.num_words)


HEURISTICS: dict[str, Callable[[State], float]] = {
    "letters": score_by_letters,
    "words": score_by_words,
}
DEFAULT_HEURISTIC = "letters"


@dataclass
class SolverOptions:
    max_words: int = MAX_WORDS
    heuristic: str = DEFAULT_HEURISTIC


@dataclass
class SolveDetails:
    num_states: int
    """States generated, including the start state."""
    num_expanded: int
    """States popped off the queue and expanded."""
    elapsed_s: float

    def asdict(self):
        d = dataclasses.asdict(self)
        d["elapsed_s"] = round(self.elapsed_s, 5)
        return d


class Solver:
    """Finds a chain of words covering every letter on the board.

    The trie should already be filtered to words that can be spelled on the board.
    """

    details: SolveDetails | None

    def __init__(self, board: Board, trie: Trie, options: SolverOptions | None = None):
        self._board = board
        self._trie = trie
        self._options = options or SolverOptions()
        assert self._options.max_words >= 1
        self._score = HEURISTICS[self._options.heuristic]
        self.details = None

    def _continues(self, prev: str, word: str) -> bool:
        """Can word be played after prev?

        The two words share a letter, so the letter after it must be on another side.
        """
        if word[0] != prev[-1]:
            return False
        if len(word) == 1:
            return True
        return self._board.side_of(word[1]) != self._board.side_of(prev[-1])

    def child_states(self, state: State) -> Iterator[State]:
        if state.num_words >= self._options.max_words:
            return
        if state.word:
            prev = state.word
            candidates = (
                w
                for w in self._trie.iter_from_prefix(prev[-1])
                if self._continues(prev, w)
            )
        else:
            candidates = self._trie.iter_words()

        board = self._board
        for word in candidates:
            yield State(
                word=word,
                num_words=state.num_words + 1,
                covered=state.covered | board.mask_of(word),
                location=board.position_of(word[-1]),
                num_letters=state.num_letters + len(word),
            )

    def solve(self) -> list[str] | None:
        """Returns the words in the solution, or None if there isn't one."""
        start_s = time.time()
        # (state, index of parent state)
        table: list[tuple[State, int]] = [(START, 0)]
        # heapq is a min-heap; the table index breaks ties in insertion order.
        queue = [(-self._score(START), 0)]
        num_expanded = 0
        result = None

        while queue and result is None:
            _, idx = heapq.heappop(queue)
            num_expanded += 1
            state, _ = table[idx]
            for child in self.child_states(state):
                child_idx = len(table)
                table.append((child, idx))
                if child.is_goal():
                    result = extract_path(table, child_idx)
                    break
                heapq.heappush(queue, (-self._score(child), child_idx))

        self.details = SolveDetails(
            num_states=len(table),
            num_expanded=num_expanded,
            elapsed_s=time.time() - start_s,
        )
        return result


def extract_path(table: list[tuple[State, int]], idx: int) -> list[str]:
    path = []
    while idx != 0:
        state, idx = table[idx]
        path.append(state.word)
    path.reverse()
    return path


def solve(board: Board, trie: Trie, **options) -> list[str] | None:
    return Solver(board, trie, SolverOptions(**options)).solve()
