"""
solver/solver_cli.py

Interactive helper (human-in-the-loop):
- YOU type the first letter of the hidden word.
- The solver suggests a guess; you type the feedback the game showed for it.
- Feedback accepted as: 'cwxxc' (c=correct, w=wrong place, a/x/b/-/.=absent),
  'gybbg', '21002', or a Python-like list '[2, 1, 0, 0, 2]'.
- Repeat until the solver names the word or runs out of candidates.

Run:
  python -m solver.solver_cli --dict words_alpha.txt

Shortcuts:
  quit / q / exit  -> exit
  reset / r        -> start over with a new first letter
"""
from __future__ import annotations

import argparse
import logging

from wordhint.config import SolverConfig
from wordhint.dictionary import Dictionary
from wordhint.errors import DictionaryLoadFailure, HintError
from wordhint.feedback import parse_feedback
from wordhint.session import Session, Status, Suggestion

QUIT = {"q", "quit", "exit"}
RESET = {"r", "reset"}


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Interactive word-guessing assistant (manual feedback)")
    ap.add_argument("--dict", default=None, help="Word list (.txt one word per line, or .csv with a 'word' column)")
    ap.add_argument("--narrow-pool", action="store_true", help="Also filter the guess pool with every clue")
    ap.add_argument("--lenient", action="store_true", help="Treat any unknown feedback code as absent")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _config_from_args(args: argparse.Namespace) -> SolverConfig:
    env = SolverConfig.from_env()
    return SolverConfig(
        narrow_guess_pool=args.narrow_pool or env.narrow_guess_pool,
        lenient_feedback=args.lenient or env.lenient_feedback,
        dictionary_path=args.dict or env.dictionary_path,
    )


def describe(s: Suggestion) -> str:
    if s.status is Status.NO_CANDIDATES:
        return "No possible words! Did you make a mistake?"
    if s.status is Status.SOLVED:
        return f"I got it! Your word is: {s.word}"
    return f"I guess {s.word}"


def _ask_letter(session: Session) -> Suggestion | None:
    while True:
        letter = input("What is the first letter? ").strip()
        if letter.lower() in QUIT:
            return None
        try:
            return session.reset(letter)
        except HintError as e:
            print("Invalid letter:", e)


def main():
    args = _build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = _config_from_args(args)

    try:
        source = Dictionary.load(config.dictionary_path)
    except DictionaryLoadFailure as e:
        raise SystemExit(f"error: {e}")
    session = Session(source, config)
    print(f"Loaded {len(source)} words. Type 'quit' to exit, 'reset' to start over.\n")

    suggestion = _ask_letter(session)
    while suggestion is not None:
        print(describe(suggestion))
        if suggestion.done:
            suggestion = _ask_letter(session)
            continue

        print(f"  ({suggestion.remaining} candidates left)")
        fb = input("What is your hint? ").strip()
        if fb.lower() in QUIT:
            break
        if fb.lower() in RESET:
            suggestion = _ask_letter(session)
            continue
        try:
            suggestion = session.apply_feedback(suggestion.word, parse_feedback(fb))
        except ValueError as e:
            print("Invalid feedback:", e)

    print("bye!")


if __name__ == "__main__":
    main()
