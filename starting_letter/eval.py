"""
starting_letter/eval.py

Play the solver against every target word (or a seeded sample) and score each
starting letter by how well the games anchored on it go.

Metrics per letter:
- games: number of targets starting with the letter
- solve_rate: fraction solved within the guess cap
- mean_guesses: mean guesses over solved games (lower is better)
- worst_case: most guesses any solved game needed
- failures: games ending with no candidates, a wrong word, or the cap

Usage:
  python -m starting_letter.eval --dict words_alpha.txt
  python -m starting_letter.eval --dict word_list.csv --sample 500 --seed 1 --out letter_results.csv
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Dict, List, Optional, Sequence

import pandas as pd

from wordhint.config import SolverConfig
from wordhint.dictionary import Dictionary
from wordhint.game import DEFAULT_MAX_GUESSES, GameResult, SolverGame
from wordhint.sampler import WordSampler
from wordhint.session import Session

COLUMNS = ["letter", "games", "solve_rate", "mean_guesses", "worst_case", "failures"]


def play_all(
    dictionary: Dictionary,
    targets: Optional[Sequence[str]] = None,
    *,
    config: Optional[SolverConfig] = None,
    max_guesses: int = DEFAULT_MAX_GUESSES,
    progress: bool = False,
) -> List[GameResult]:
    """Play one game per target (all dictionary words if `targets` is None)."""
    pool = list(targets) if targets is not None else dictionary.texts()
    game = SolverGame(Session(dictionary, config), max_guesses=max_guesses)

    results: List[GameResult] = []
    for i, t in enumerate(pool):
        results.append(game.play(t))
        if progress and (i + 1) % 100 == 0:
            print(f"Played {i+1}/{len(pool)} targets...", flush=True)
    return results


def summarize_by_letter(results: Sequence[GameResult]) -> List[Dict[str, float]]:
    """
    Aggregate game results per starting letter.

    Returns
    -------
    list[dict]
        Sorted best first: solve_rate desc, then mean_guesses asc, then worst_case asc.
    """
    if not results:
        raise ValueError("results must be non-empty")

    df = pd.DataFrame(
        {
            "letter": [r.target[0] for r in results],
            "solved": [r.solved for r in results],
            "guesses": [r.guesses for r in results],
        }
    )
    solved = df[df["solved"]]

    grouped = df.groupby("letter")
    out = pd.DataFrame(
        {
            "games": grouped.size(),
            "solve_rate": grouped["solved"].mean(),
            "failures": grouped.size() - grouped["solved"].sum(),
        }
    )
    out["mean_guesses"] = solved.groupby("letter")["guesses"].mean()
    out["worst_case"] = solved.groupby("letter")["guesses"].max()
    out = out.reset_index()

    # letters with no solved game sort last
    out["mean_guesses"] = out["mean_guesses"].fillna(float("inf"))
    out["worst_case"] = out["worst_case"].fillna(0).astype(int)

    out = out.sort_values(
        ["solve_rate", "mean_guesses", "worst_case"], ascending=[False, True, True], kind="mergesort"
    )

    rows: List[Dict[str, float]] = []
    for rec in out[COLUMNS].to_dict(orient="records"):
        rows.append(
            {
                "letter": str(rec["letter"]),
                "games": int(rec["games"]),
                "solve_rate": float(rec["solve_rate"]),
                "mean_guesses": float(rec["mean_guesses"]),
                "worst_case": int(rec["worst_case"]),
                "failures": int(rec["failures"]),
            }
        )
    return rows


def _print_top(rows: List[Dict[str, float]], k: int = 26) -> None:
    print(f"\nTop {k} starting letters by solve rate:")
    print(f"{'rank':>4}  {'letter':<6}  {'games':>6}  {'solved':>7}  {'mean':>6}  {'worst':>5}  {'fails':>5}")
    for idx, r in enumerate(rows[:k], start=1):
        print(
            f"{idx:>4}  {r['letter']:<6}  {int(r['games']):>6}  {r['solve_rate']:>7.3f}  {r['mean_guesses']:>6.2f}  {int(r['worst_case']):>5}  {int(r['failures']):>5}"
        )


def _write_csv(rows: List[Dict[str, float]], path: str) -> None:
    pd.DataFrame(rows, columns=COLUMNS).to_csv(path, index=False)


def main():
    ap = argparse.ArgumentParser(description="Evaluate starting letters by playing the solver against every target.")
    ap.add_argument("--dict", default="words_alpha.txt", help="Word list (.txt or .csv with a 'word' column)")
    ap.add_argument("--sample", type=int, default=None, help="Play only K randomly chosen targets (for speed)")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for target sampling")
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_MAX_GUESSES, help="Guess cap per game")
    ap.add_argument("--narrow-pool", action="store_true", help="Also filter the guess pool with every clue")
    ap.add_argument("--out", default="starting_letter_results.csv", help="Output CSV filename")
    ap.add_argument("--top", type=int, default=26, help="How many top rows to print")
    ap.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show progress during evaluation (use --no-progress to disable)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    dictionary = Dictionary.load(args.dict)
    targets = None
    if args.sample is not None:
        targets = WordSampler(dictionary, seed=args.seed).sample_words(args.sample)

    config = SolverConfig(narrow_guess_pool=args.narrow_pool, dictionary_path=args.dict)
    n = len(targets) if targets is not None else len(dictionary)
    print(f"Playing {n} targets against {len(dictionary)} words...", flush=True)
    t0 = time.perf_counter()
    results = play_all(dictionary, targets, config=config, max_guesses=args.max_guesses, progress=args.progress)
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)

    rows = summarize_by_letter(results)
    _print_top(rows, k=args.top)
    _write_csv(rows, args.out)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
