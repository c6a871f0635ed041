"""
Feedback utilities.

- feedback_for: the per-position report a player would type for a guess, given the
  answer. Used to simulate games and to check the solver against a known target.
- parse_feedback: accept the usual human notations and turn them into c/w/x codes.
"""

import re
from collections import Counter

from wordhint.clues import validate_word
from wordhint.config import CORRECT, WORD_LEN, WRONG_PLACE

ABSENT = "x"


def feedback_for(guess: str, target: str) -> str:
    """
    Compute the WORD_LEN-character feedback string for `guess` against `target`.

    Returns
    -------
    str
        One code per position:
        - 'c' : guess[i] == target[i]
        - 'w' : the letter occurs in `target` at some position that the guess did
                not already match with the same letter
        - 'x' : otherwise

    Duplicate Handling
    ------------------
    Every copy of a letter gets 'w' while the target holds an unmatched copy of it,
    and 'x' only once all of the target's copies are matched in place. So 'x' always
    means "no further copy of this letter anywhere", which is what the clue builder
    relies on.

        feedback_for('lever', 'ethos') -> 'xwxwx'   (both e's 'w': e at 0 is unmatched)
        feedback_for('speed', 'crepe') -> 'xwcwx'   (e at 2 matched, e at 4 unmatched)
        feedback_for('eerie', 'ethos') -> 'cxxxx'   (the only e is matched in place)
    """
    g = validate_word(guess)
    t = validate_word(target)

    unmatched = Counter(tc for gc, tc in zip(g, t) if gc != tc)

    codes = []
    for gc, tc in zip(g, t):
        if gc == tc:
            codes.append(CORRECT)
        elif unmatched[gc] > 0:
            codes.append(WRONG_PLACE)
        else:
            codes.append(ABSENT)
    return "".join(codes)


def parse_feedback(s: str) -> str:
    """Parse a WORD_LEN-char feedback into c/w/x codes.
    Accepted forms:
      - native:  c/w plus any absent code (a/x/b/-/.)
      - colors:  g/y  (green/yellow; b stays absent)
      - digits:  2/1/0
      - list:    [0, 1, 2, 2, 0]
    Raises ValueError on a wrong-sized list; other codes are passed through so the
    solver's own validation can reject them.
    """
    s = s.strip().lower()
    # List-like form: [0,1,2,2,0]
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != WORD_LEN:
            raise ValueError(f"list form must contain exactly {WORD_LEN} 0/1/2 values")
        s = "".join(nums)

    mapping = {"g": CORRECT, "y": WRONG_PLACE, "2": CORRECT, "1": WRONG_PLACE, "0": ABSENT}
    return "".join(mapping.get(ch, ch) for ch in s)
