#!/usr/bin/python3
"""Prints the vocabulary of an AGI game, or looks up words in it."""

import argparse
import logging
import sys

from extraction import ByteSource, letter_offsets, read_letter_index
from words import NOT_FOUND, WordsFormatError, load_words_file


def build_parser():
    p = argparse.ArgumentParser(
        prog="dumpwords", description="Dump or search an AGI WORDS.TOK file."
    )
    p.add_argument("path", help="Path to the WORDS.TOK file.")
    p.add_argument("words", nargs="*", help="Words to look up; all words are listed if none.")
    p.add_argument("--index", action="store_true", help="Show the letter index first.")
    p.add_argument("--groups", action="store_true", help="List synonyms together, by word number.")
    p.add_argument("--verbose", "-v", action="store_true", help="Log decoding details.")
    return p


def print_index(path):
    with open(path, "rb") as f:
        index = read_letter_index(ByteSource(f))
    for letter, offset in letter_offsets(index):
        print(f"{letter}\t{offset:#06x}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        table = load_words_file(args.path)
        if args.index:
            print_index(args.path)
    except (OSError, EOFError, WordsFormatError) as e:
        print(f"dumpwords: {e}", file=sys.stderr)
        return 2

    if args.words:
        missing = 0
        for text in args.words:
            number = table.find_word(text)
            if number == NOT_FOUND:
                print(f"{text}\tnot found")
                missing += 1
            else:
                print(f"{text}\t{number}")
        return 1 if missing > 0 else 0

    if args.groups:
        for number, texts in table.get_groups():
            print(f"{number}: {', '.join(texts)}")
    else:
        for entry in table.get_word_list():
            print(f"{entry.number}\t{entry.text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
