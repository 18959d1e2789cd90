#!/usr/bin/env python
"""Solve a Letter Boxed puzzle and print the solution.

    $ python -m letterboxed.solve "vks pyi elu rao" --dictionary wordlists/2of12.txt
"""

import argparse
import json
import sys
import time

from letterboxed.args import add_standard_args, get_options_from_args
from letterboxed.board import Board, InvalidBoardError
from letterboxed.solver import Solver
from letterboxed.trie import make_board_trie


def format_solution(solution: list[str]) -> str:
    return ", ".join(word.upper() for word in solution)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="Letter Boxed solver",
        description="Find a short chain of words which uses every letter on the board.",
    )
    parser.add_argument(
        "board_letters",
        type=str,
        help="The 12 letters on the board, clockwise. Spaces are ignored.",
    )
    parser.add_argument(
        "--show_words",
        action="store_true",
        help="Show the words that can be made with this board.",
    )
    add_standard_args(parser)
    args = parser.parse_args(argv)
    options = get_options_from_args(args)

    try:
        board = Board.from_letters(args.board_letters)
    except InvalidBoardError as e:
        print(f"Invalid board: {e}")
        return 2
    print(board.render())
    print()

    start_s = time.time()
    trie = make_board_trie(args.dictionary, board)
    sys.stderr.write(f"Built trie in {time.time() - start_s:.2f}s\n")

    if args.show_words:
        for word in trie.iter_words():
            print(word)
    print(f"There are {trie.size()} words that can be made with this board.")

    solver = Solver(board, trie, options)
    solution = solver.solve()
    sys.stderr.write(json.dumps(solver.details.asdict()) + "\n")
    if solution is None:
        print("No solution found")
        return 1
    print(f"Found solution: {format_solution(solution)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
