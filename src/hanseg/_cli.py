"""Command-line driver: batch file segmentation or an interactive prompt."""

from __future__ import annotations

import argparse
import sys
import time

from loguru import logger

from ._errors import HansegError
from ._loader import dump_bundle, load_bundle, load_text
from ._segmenter import DEFAULT_DEPTH, Segmenter

_WHITESPACE = "\r\n \t"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanseg",
        description="Segment unbroken text into dictionary words (MMSeg).",
    )
    parser.add_argument(
        "file", nargs="?", default=None,
        help="UTF-8 file to segment in one pass; omit for an interactive prompt",
    )
    parser.add_argument(
        "--dict", dest="words", default="words.dic",
        help="word list, one word per line (default: %(default)s)",
    )
    parser.add_argument(
        "--chars", default=None,
        help="char frequency file of '<char> <count>' lines",
    )
    parser.add_argument(
        "--bundle", default=None,
        help="compiled bundle directory; replaces --dict/--chars",
    )
    parser.add_argument(
        "--compile", dest="compile_dir", default=None, metavar="DIR",
        help="write the loaded dictionaries as a bundle to DIR and exit",
    )
    parser.add_argument(
        "--depth", type=int, default=DEFAULT_DEPTH,
        help="lookahead in words (default: %(default)s)",
    )
    parser.add_argument(
        "--sep", default="  ",
        help="separator printed between words (default: two spaces)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="debug logging",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    logger.enable("hanseg")


def _run_file(segmenter: Segmenter, path: str) -> int:
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to open {path}: {e}", file=sys.stderr)
        return 1
    t0 = time.perf_counter()
    words = segmenter.segment(text)
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.3f} seconds, {len(words)} words from {len(text)} chars")
    return 0


def _run_interactive(segmenter: Segmenter, sep: str) -> int:
    while True:
        try:
            line = input("Input String: ")
        except EOFError:
            break
        print(sep.join(segmenter.segment(line.strip(_WHITESPACE))))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    if args.depth < 0:
        print("--depth must be >= 0", file=sys.stderr)
        return 2

    try:
        if args.bundle is not None:
            dictionary, freqs = load_bundle(args.bundle)
        else:
            dictionary, freqs = load_text(args.words, args.chars)
    except HansegError as e:
        print(f"Dictionary unavailable: {e}", file=sys.stderr)
        return 1

    if args.compile_dir is not None:
        dump_bundle(dictionary, freqs, args.compile_dir)
        return 0

    segmenter = Segmenter(dictionary, freqs, args.depth)
    if args.file is not None:
        return _run_file(segmenter, args.file)
    return _run_interactive(segmenter, args.sep)

