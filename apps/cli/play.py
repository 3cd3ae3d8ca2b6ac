# apps/cli/play.py
"""
CLI entry point for playing evil hangman.

This script:
  1) Validates the dictionary (prints counts + SHA, lists playable lengths).
  2) Builds a HangmanManager over the dictionary.
  3) Plays one round, either interactively (letters read from stdin) or
     automatically with a registered guesser, and reveals the secret word.

Usage:
    python -m apps.cli.play --dictionary words.txt --length 5 --difficulty medium
    python -m apps.cli.play --dictionary words.txt --auto letter_freq --seed 7
"""

from __future__ import annotations

import argparse
import random
import sys

from packages.datasets import load_dictionary, validate_dictionary, pretty_summary
from packages.engine import Difficulty, display_pattern, is_revealed
from packages.engine.errors import HangmanError
from packages.game import HangmanManager
from packages.harness import play_round, DEFAULT_GUESSES
from packages.players import create_guesser, get_guesser_ids


def _print_status(manager: HangmanManager) -> None:
    print(f"\nGuesses left: {manager.guesses_left}")
    print(f"Guessed so far: {manager.guesses_made()}")
    print(f"Current word: {display_pattern(manager.pattern)}")


def _play_interactive(manager: HangmanManager, args) -> int:
    """
    Read letters from stdin until the round is won or lost.
    Bad input is reported and re-prompted; it never costs a guess.
    """
    manager.prep_for_round(args.length, args.guesses, args.difficulty)
    print(f"{manager.num_words_current()} words of length {args.length} are in play.")

    while manager.guesses_left > 0 and not is_revealed(manager.pattern):
        _print_status(manager)
        try:
            raw = input("Your guess? ")
        except EOFError:
            print("\nNo more input; giving up.")
            break
        letter = raw.strip().lower()
        try:
            families = manager.make_guess(letter)
        except HangmanError as e:
            print(e)
            continue
        if args.debug:
            print(f"DEBUGGING: {len(families)} families: {families}")
        if letter in manager.pattern:
            print(f"Yes, there is at least one {letter}.")
        else:
            print(f"Sorry, there are no {letter}'s.")

    return _finish(manager)


def _play_auto(manager: HangmanManager, args) -> int:
    guesser = create_guesser(args.auto)
    r = play_round(
        manager, guesser,
        length=args.length, num_guesses=args.guesses,
        difficulty=args.difficulty, seed=args.seed,
    )
    for letter, patt, left, live in r["history"]:
        print(f"{letter}  {display_pattern(patt)}  guesses left={left}  live words={live}")
    print(f"\n{guesser.name}: {'won' if r['won'] else 'lost'} in {r['guesses']} guesses "
          f"({r['time_ms']:.1f} ms). The word was {r['secret']}.")
    return 0 if r["won"] else 1


def _finish(manager: HangmanManager) -> int:
    secret = manager.get_secret_word()
    if is_revealed(manager.pattern):
        print(f"\nYou beat me! The word was {manager.pattern}.")
        return 0
    print(f"\nSorry, you lose. The word was {secret}.")
    return 1


def main(argv=None) -> int:
    """
    Parse CLI args, validate the dictionary, and play one round.
    """
    guesser_choices = ", ".join(get_guesser_ids())

    ap = argparse.ArgumentParser(description="evil hangman: play one round")
    ap.add_argument("--dictionary", required=True, help="path to a one-word-per-line dictionary")
    ap.add_argument("--length", type=int, default=5, help="word length for the round")
    ap.add_argument("--guesses", type=int, default=DEFAULT_GUESSES,
                    help="wrong guesses allowed before losing")
    ap.add_argument("--difficulty", type=Difficulty.parse, default=Difficulty.HARD,
                    help="easy, medium or hard")
    ap.add_argument("--debug", action="store_true", help="print the manager's decisions")
    ap.add_argument("--auto", metavar="GUESSER",
                    help=f"let a guesser play (one of: {guesser_choices})")
    ap.add_argument("--seed", type=int, help="RNG seed (secret word + guesser tie-breaks)")
    args = ap.parse_args(argv)

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    # 2) Build the manager; a seeded rng makes the secret word reproducible
    words = load_dictionary(args.dictionary)
    rng = random.Random(args.seed)
    try:
        manager = HangmanManager(words, debug=args.debug, rng=rng)
        if manager.num_words(args.length) == 0:
            playable = sorted(rep["lengths"])
            print(f"No words of length {args.length}. Playable lengths: {playable}")
            return 2
        # 3) Play
        if args.auto:
            return _play_auto(manager, args)
        return _play_interactive(manager, args)
    except HangmanError as e:
        print(f"Cannot start round: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
