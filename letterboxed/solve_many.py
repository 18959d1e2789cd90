#!/usr/bin/env python
"""Solve many Letter Boxed boards, one per line of input.

    $ python -m letterboxed.solve_many boards.txt
"""

import argparse
import fileinput
import sys
import time

from tqdm import tqdm

from letterboxed.args import add_standard_args, get_options_from_args
from letterboxed.board import Board, InvalidBoardError
from letterboxed.solve import format_solution
from letterboxed.solver import Solver, SolverOptions
from letterboxed.trie import Trie, read_words


def solve_board(words: list[str], board: Board, options: SolverOptions) -> list[str] | None:
    trie = Trie.create_for_board(words, board)
    return Solver(board, trie, options).solve()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="Batch Letter Boxed solver",
        description="Solve each board (one per line) from the files or stdin.",
    )
    parser.add_argument("files", nargs="*", help="Files with one board per line.")
    add_standard_args(parser)
    args = parser.parse_args(argv)
    options = get_options_from_args(args)

    words = read_words(args.dictionary)
    sys.stderr.write(f"Loaded {len(words)} words from {args.dictionary}\n")

    start_s = time.time()
    n = 0
    num_solved = 0
    with fileinput.input(args.files) as lines:
        for line in tqdm(lines, smoothing=0):
            line = line.strip()
            if not line:
                continue
            try:
                board = Board.from_letters(line)
            except InvalidBoardError as e:
                sys.stderr.write(f"Invalid board: {e}\n")
                print(f"{line}: invalid board")
                continue
            solution = solve_board(words, board, options)
            if solution is None:
                print(f"{board}: -")
            else:
                print(f"{board}: {format_solution(solution)}")
                num_solved += 1
            n += 1
    elapsed_s = time.time() - start_s
    rate = n / elapsed_s if elapsed_s else 0.0
    sys.stderr.write(
        f"{n} boards ({num_solved} solved) in {elapsed_s:.2f}s = {rate:.2f} boards/s\n"
    )


if __name__ == "__main__":
    main()
