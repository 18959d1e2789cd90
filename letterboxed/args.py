"""Standard command-line arguments shared across the tools."""

import argparse

from letterboxed.solver import DEFAULT_HEURISTIC, HEURISTICS, MAX_WORDS, SolverOptions


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/2of12.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--max_words",
        type=int,
        default=MAX_WORDS,
        help="Give up on chains with more than this many words.",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        choices=sorted(HEURISTICS.keys()),
        default=DEFAULT_HEURISTIC,
        help="How to score partial solutions. 'letters' prefers chains that "
        "cover the board with fewer letters, 'words' with fewer words.",
    )


def get_options_from_args(args: argparse.Namespace) -> SolverOptions:
    if args.max_words < 1:
        raise ValueError(f"--max_words must be positive, got {args.max_words}")
    return SolverOptions(max_words=args.max_words, heuristic=args.heuristic)
