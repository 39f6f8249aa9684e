from __future__ import annotations

import argparse
import logging
import sys

from commit_reveal import SCHEME_ID, verify_commitment
from game import RoundController
from help_table import format_help_table
from protocol import CryptoUnavailable, InvalidConfiguration, InvalidInput, MoveSet
from rules import build_outcome_table
from settings import load_settings

logger = logging.getLogger(__name__)

USAGE_LINES = (
    "Invalid arguments. Please provide an odd number >=3 of non-repeating strings.",
    "Example: rps play rock paper scissors",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rps")
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play one round against the computer")
    play.add_argument("moves", nargs="*", help="Odd number (>=3) of distinct moves, in cycle order")
    play.add_argument(
        "--retry-invalid",
        action="store_true",
        help="Ask again after an invalid selection instead of stopping (or set RPS_RETRY_INVALID=1)",
    )
    play.add_argument("--verbose", action="store_true", help="Debug logging on stderr")

    rules = sub.add_parser("rules", help="Print the win/lose table for a move set")
    rules.add_argument("moves", nargs="*")

    verify = sub.add_parser("verify", help=f"Check a disclosed move and key against the {SCHEME_ID} commitment")
    verify.add_argument("--hmac", required=True, help="Commitment printed before the move was chosen")
    verify.add_argument("--move", required=True, help="Computer move disclosed after the round")
    verify.add_argument("--key", required=True, help="HMAC key disclosed after the round")

    args = parser.parse_args(argv)
    try:
        settings = load_settings(args)
    except ValueError as exc:
        raise SystemExit(str(exc))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "verify":
        if verify_commitment(expected_commitment=args.hmac, message=args.move, key=args.key):
            print("Commitment verified.")
            return 0
        print(f"Commitment mismatch: HMAC of {args.move!r} under the given key is not {args.hmac}.", file=sys.stderr)
        return 1

    move_set = _parse_moves(args.moves)
    if move_set is None:
        return 2

    if args.cmd == "rules":
        print(format_help_table(build_outcome_table(move_set)))
        return 0

    if args.cmd == "play":
        controller = RoundController(move_set, retry_invalid=settings.retry_invalid)
        try:
            controller.play()
        except InvalidInput as exc:
            logger.debug("round aborted: %r", exc.__cause__)
            print(str(exc), file=sys.stderr)
            return 1
        except CryptoUnavailable as exc:
            raise SystemExit(f"Cannot play fairly: {exc}")
        except KeyboardInterrupt:
            print("\nGoodbye!")
            return 130
        return 0

    raise SystemExit("unhandled command")


def _parse_moves(values: list[str]) -> MoveSet | None:
    try:
        return MoveSet.parse(values)
    except InvalidConfiguration as exc:
        logger.debug("rejected move set: %s", exc)
        for line in USAGE_LINES:
            print(line)
        return None


if __name__ == "__main__":
    raise SystemExit(main())
