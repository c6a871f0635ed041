"""
server/app.py

HTTP front end for a single process-wide solving session.

Routes
------
GET /reset/<letter>        start over; the answer begins with <letter>
GET /hint/<word>/<hint>    report the feedback <hint> for the guess <word>

Both return JSON {"status": ..., "word": ..., "remaining": ...}; bad input gives
HTTP 400 with {"error": ...}.

Run:
  python -m server.app --dict words_alpha.txt --port 8088
"""

from __future__ import annotations

import argparse
import logging

from flask import Flask, jsonify

from wordhint.config import SolverConfig
from wordhint.dictionary import Dictionary
from wordhint.errors import HintError
from wordhint.session import Session, Suggestion

logger = logging.getLogger(__name__)


def create_app(session: Session) -> Flask:
    app = Flask(__name__)

    def _reply(s: Suggestion):
        return jsonify({"status": s.status.value, "word": s.word, "remaining": s.remaining})

    @app.errorhandler(HintError)
    def bad_input(e: HintError):
        return jsonify({"error": str(e)}), 400

    @app.route("/reset/<letter>", methods=["GET"])
    def reset(letter: str):
        return _reply(session.reset(letter))

    @app.route("/hint/<word>/<hint>", methods=["GET"])
    def submit_hint(word: str, hint: str):
        return _reply(session.apply_feedback(word, hint))

    return app


def main():
    ap = argparse.ArgumentParser(description="Serve the word-guessing assistant over HTTP")
    ap.add_argument("--dict", default=None, help="Word list path (default: $WORDHINT_DICT or words_alpha.txt)")
    ap.add_argument("--host", default="0.0.0.0")
    ap.add_argument("--port", type=int, default=8088)
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    env = SolverConfig.from_env()
    config = SolverConfig(
        narrow_guess_pool=env.narrow_guess_pool,
        lenient_feedback=env.lenient_feedback,
        dictionary_path=args.dict or env.dictionary_path,
    )

    # A missing or empty word list is fatal: DictionaryLoadFailure propagates.
    source = Dictionary.load(config.dictionary_path)
    app = create_app(Session(source, config))
    logger.info("serving %d words on %s:%d", len(source), args.host, args.port)
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
