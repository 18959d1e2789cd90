"""Arena-backed Trie over the words that can be spelled on a board.

Nodes live in a list and refer to each other by index. Node 0 is the root and
node 1 is a shared word-end marker: a node's prefix is a complete word iff
WORD_END is one of its children.

Each node tracks how many words end in its subtree. Traversal visits the
children with the most words first, and the word-end marker (worth one word)
after any letter child with an equal count. So a word is always produced after
the longer words that extend it ("teapot" before "tea").
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Self

from letterboxed.board import Board

ROOT = 0
WORD_END = 1


@dataclass(slots=True)
class Node:
    letter: str | None
    parent: int
    children: list[int] = field(default_factory=list)
    num_words: int = 0
    """Number of words that end in this subtree."""


class Trie:
    _nodes: list[Node]
    _num_words: int

    def __init__(self):
        self._nodes = [Node(None, ROOT), Node(None, ROOT)]
        self._num_words = 0

    def size(self):
        """Number of distinct words."""
        return self._num_words

    def __len__(self):
        return self._num_words

    def num_nodes(self):
        return len(self._nodes)

    def _child(self, idx: int, letter: str) -> int | None:
        for child in self._nodes[idx].children:
            if self._nodes[child].letter == letter:
                return child
        return None

    def add_word(self, word: str) -> bool:
        """Insert word, returning False if it was already present."""
        assert word, "Cannot add the empty word"
        path = [ROOT]
        cursor = ROOT
        for c in word:
            child = self._child(cursor, c)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(Node(c, cursor))
                self._nodes[cursor].children.append(child)
            cursor = child
            path.append(cursor)

        node = self._nodes[cursor]
        if WORD_END in node.children:
            return False
        node.children.append(WORD_END)
        for idx in path:
            self._nodes[idx].num_words += 1
        self._num_words += 1
        return True

    def find_node(self, prefix: str) -> int | None:
        cursor = ROOT
        for c in prefix:
            cursor = self._child(cursor, c)
            if cursor is None:
                return None
        return cursor

    def contains(self, word: str) -> bool:
        idx = self.find_node(word)
        return idx is not None and WORD_END in self._nodes[idx].children

    def __contains__(self, word: str):
        return self.contains(word)

    def spell(self, idx: int) -> str:
        """The prefix that leads to this node."""
        assert idx != WORD_END
        letters = []
        while idx != ROOT:
            node = self._nodes[idx]
            letters.append(node.letter)
            idx = node.parent
        return "".join(reversed(letters))

    def _ordered_children(self, idx: int) -> list[int]:
        def key(child: int):
            if child == WORD_END:
                return (-1, 1)
            return (-self._nodes[child].num_words, 0)

        # sorted() is stable, so ties keep insertion order.
        return sorted(self._nodes[idx].children, key=key)

    def _walk(self, start: int, prefix: str) -> Iterator[str]:
        # Each frame is (node, children still to visit). letters holds one
        # letter for every frame above the starting one.
        stack = [(start, iter(self._ordered_children(start)))]
        letters: list[str] = []
        while stack:
            _, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                if stack:
                    letters.pop()
            elif child == WORD_END:
                yield prefix + "".join(letters)
            else:
                letters.append(self._nodes[child].letter)
                stack.append((child, iter(self._ordered_children(child))))

    def iter_words(self) -> Iterator[str]:
        """Every word in the trie, exactly once."""
        return self._walk(ROOT, "")

    def __iter__(self):
        return self.iter_words()

    def iter_from_prefix(self, prefix: str) -> Iterator[str]:
        """Every word starting with prefix, or nothing if there are none."""
        idx = self.find_node(prefix)
        if idx is None:
            return iter(())
        return self._walk(idx, prefix)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        trie = Trie()
        for word in words:
            trie.add_word(word)
        return trie

    @staticmethod
    def create_for_board(words: Iterable[str], board: Board) -> Self:
        """Only keep the words which can be spelled on this board."""
        return Trie.create_from_wordlist(w for w in words if board.can_spell(w))


def is_letterboxed_word(word: str) -> bool:
    if len(word) < 3 or word.endswith("'s"):
        return False
    return word.isalpha()


def read_words(dict_input: str) -> list[str]:
    words = []
    with open(dict_input) as f:
        for line in f:
            word = line.strip().lower()
            if is_letterboxed_word(word):
                words.append(word)
    return words


def make_board_trie(dict_input: str, board: Board) -> Trie:
    return Trie.create_for_board(read_words(dict_input), board)
