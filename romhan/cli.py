#!/usr/bin/env python3
"""
Command-line romanized Korean to Hangul converter.

    romhan -i "han gug eo"          # 한국어
    echo "an nyeong" | romhan       # reads stdin line by line
    romhan -I                       # interactive prompt, "exit" to quit
    romhan -t                       # write config.json into the current directory
    romhan -d user_dict.json -i addr
"""

import argparse
import logging
import os
import sys

from romhan import __version__
from romhan.config import Config, save_config
from romhan.hangul import HangulConverter
from romhan.user_dict import UserDict

logger = logging.getLogger(__name__)


class LineConverter:
    """Converts whole lines, preferring an exact user dictionary match."""

    def __init__(self, user_dict=None):
        self.converter = HangulConverter()
        self.user_dict = user_dict if user_dict is not None else UserDict.empty()

    def __call__(self, line):
        text = self.user_dict.lookup(line)
        if text is None:
            text = self.converter.convert(line)
        return text


def run_stdin(convert, stdin, stdout):
    for line in stdin:
        print(convert(line.rstrip("\n")), file=stdout)


def run_interactive(convert, stdin, stdout):
    print("Romanized Korean to Hangul (type 'exit' to quit)", file=stdout)
    while True:
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break
        text = line.strip()
        if text == "exit":
            break
        print(f"  → {convert(text)}", file=stdout)


def generate_template(directory):
    path = os.path.join(directory, "config.json")
    if os.path.exists(path):
        print(f"config.json already exists: {path}")
        return path
    save_config(Config(), path)
    print(f"Created config.json: {path}")
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="romhan",
        description="Convert romanized Korean to Hangul",
    )
    parser.add_argument(
        "-i", "--input",
        help="Text to convert",
    )
    parser.add_argument(
        "-I", "--interactive",
        action="store_true",
        help="Interactive mode",
    )
    parser.add_argument(
        "-t", "--template",
        action="store_true",
        help="Write a default config.json into the current directory",
    )
    parser.add_argument(
        "-d", "--dict",
        metavar="FILE",
        help="User dictionary JSON applied to each whole input line",
    )
    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging on stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.version:
        print(f"romhan {__version__}")
        return 0

    if args.template:
        generate_template(os.getcwd())
        return 0

    user_dict = UserDict.load(args.dict) if args.dict else None
    convert = LineConverter(user_dict)

    if args.interactive:
        run_interactive(convert, sys.stdin, sys.stdout)
    elif args.input is not None:
        print(convert(args.input))
    else:
        run_stdin(convert, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
