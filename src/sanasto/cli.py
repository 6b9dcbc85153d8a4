"""
Command line front end: look words up, complete prefixes, reverse-find.

Words can be given as arguments or piped in on stdin:

    sanasto koira kissa
    echo "terve taas" | sanasto
    sanasto --complete koi
    sanasto --reverse "small dog"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

import yaml

from .config import SanastoConfig
from .engine import LookupEngine
from .errors import SanastoError
from .render import format_gloss_text

logger = logging.getLogger("sanasto")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="sanasto",
        description="A pocket Finnish-English dictionary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Look up words
  sanasto hei maailma

  # Look up every word of piped text
  echo "terve taas" | sanasto

  # Show completions for a prefix
  sanasto --complete koi

  # Find words by their English meaning
  sanasto --reverse dog
        """,
    )

    parser.add_argument(
        "words",
        nargs="*",
        help="Words to look up (default: read from piped stdin)"
    )
    parser.add_argument(
        "--complete",
        metavar="PREFIX",
        help="Print headwords starting with PREFIX"
    )
    parser.add_argument(
        "--reverse",
        metavar="QUERY",
        help="Print headwords whose English meaning contains QUERY"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML config file (default: environment / .env)"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory with words.txt, glosses.jsonl and go-deeper.txt"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write debug logging to the configured log file"
    )

    return parser


def configure_logging(config: SanastoConfig) -> None:
    """Send DEBUG logs to the log file in debug mode, else WARNING to stderr."""
    if config.debug:
        logging.basicConfig(
            filename=str(config.log_file),
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
            force=True,
        )
        logger.debug("Debug mode enabled")
    else:
        logging.basicConfig(level=logging.WARNING, force=True)


def load_config(args: argparse.Namespace) -> SanastoConfig:
    if args.config is not None:
        config = SanastoConfig.from_yaml(args.config)
        updates = {}
        if args.data_dir is not None:
            updates["data_dir"] = args.data_dir
        if args.debug:
            updates["debug"] = True
        return config.model_copy(update=updates)
    return SanastoConfig.from_env(data_dir=args.data_dir, debug=args.debug or None)


def print_definitions(engine: LookupEngine, terms: list[str], out: TextIO) -> None:
    """Print each term's rendered definition between === markers."""
    print("===", file=out)
    for i, term in enumerate(terms):
        if engine.lookup(term):
            print(format_gloss_text(term, engine.store, engine.expander).rstrip("\n"), file=out)
        else:
            print(f"'{term}' not found.", file=out)
        if i < len(terms) - 1:
            print("---", file=out)
    print("===", file=out)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, out: TextIO | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        stdin: Input stream for piped words (default: sys.stdin)
        out: Output stream (default: sys.stdout)

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    terms = list(args.words)
    if not terms and args.complete is None and args.reverse is None and not stdin.isatty():
        terms = stdin.read().split()

    if not terms and args.complete is None and args.reverse is None:
        parser.print_help(file=out)
        return 0

    try:
        config = load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    configure_logging(config)

    try:
        engine = LookupEngine.from_config(config)
    except (OSError, SanastoError) as e:
        print(f"Error loading dictionary data: {e}", file=sys.stderr)
        return 1

    if args.complete is not None:
        for word in engine.complete(args.complete):
            print(word, file=out)

    if args.reverse is not None:
        matches = engine.reverse_find(args.reverse)
        if matches:
            for word in matches:
                print(word, file=out)
        else:
            print(f"No words found with meaning containing '{args.reverse.strip().lower()}'.", file=out)

    if terms:
        print_definitions(engine, terms, out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
