#!/usr/bin/env python3
"""
char-markov command line

Trains a character language model on a corpus and prints generated text.

Usage:
    char-markov 3 corpus.txt "The " 200                  # random output
    char-markov 3 corpus.txt "The " 200 --random-seed 7  # reproducible output
    char-markov 2 reviews.csv "It" 80 --csv-column text  # corpus from a CSV column
    char-markov 3 corpus.txt "The " 200 --dump           # also print the model

Missing or malformed arguments produce no output. Arguments after the
fourth positional value are ignored.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import GeneratorConfig
from .datasets import load_corpus, load_corpus_csv
from .language_model import LanguageModel

logger = logging.getLogger(__name__)


class QuietArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise ValueError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = QuietArgumentParser(
        description="Generate text with a character-level Markov chain"
    )

    parser.add_argument("window_length", nargs="?", help="Number of context characters")
    parser.add_argument("corpus", nargs="?", help="Path to the training corpus")
    parser.add_argument("seed_text", nargs="?", help="Text to start generating from")
    parser.add_argument("text_length", nargs="?", help="Number of characters to generate")

    parser.add_argument(
        "--random-seed", "-s",
        type=int,
        default=None,
        help="Seed the random source for reproducible output"
    )

    parser.add_argument(
        "--csv-column",
        type=str,
        default=None,
        help="Treat the corpus as CSV and train on this column"
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the learned model before the generated text"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )

    return parser


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_runnable(config: GeneratorConfig) -> bool:
    """Check field types and values of a merged configuration."""
    return (
        _is_int(config.window_length)
        and config.window_length > 0
        and _is_int(config.text_length)
        and isinstance(config.corpus_path, str)
        and bool(config.corpus_path)
        and isinstance(config.seed_text, str)
        and (config.random_seed is None or _is_int(config.random_seed))
        and (config.csv_column is None or isinstance(config.csv_column, str))
        and isinstance(config.log_level, str)
    )


def load_config_file(path: str) -> Optional[GeneratorConfig]:
    """Read a JSON config file, or return None when it is unreadable or malformed."""
    try:
        with open(path, 'r') as f:
            config_dict = json.load(f)
    except (OSError, ValueError):
        return None

    if not isinstance(config_dict, dict):
        return None
    return GeneratorConfig.from_dict(config_dict)


def resolve_config(args: argparse.Namespace) -> Optional[GeneratorConfig]:
    """
    Merge the JSON config file (if any) with the command line.

    Returns:
        The run configuration, or None when the arguments are missing or malformed
    """
    if args.config:
        config = load_config_file(args.config)
        if config is None:
            return None
    elif None in (args.window_length, args.corpus, args.seed_text, args.text_length):
        return None
    else:
        config = GeneratorConfig()

    try:
        if args.window_length is not None:
            config.window_length = int(args.window_length)
        if args.text_length is not None:
            config.text_length = int(args.text_length)
    except ValueError:
        return None

    if args.corpus is not None:
        config.corpus_path = args.corpus
    if args.seed_text is not None:
        config.seed_text = args.seed_text
    if args.random_seed is not None:
        config.random_seed = args.random_seed
    if args.csv_column is not None:
        config.csv_column = args.csv_column
    if args.log_level is not None:
        config.log_level = args.log_level

    if not is_runnable(config):
        return None
    return config


def run(config: GeneratorConfig, dump: bool = False) -> str:
    """
    Train on the configured corpus and generate text.

    Args:
        config: Run configuration
        dump: Prepend the textual dump of the model

    Returns:
        The text to print
    """
    if config.csv_column:
        corpus = load_corpus_csv(config.corpus_path, column=config.csv_column)
    else:
        corpus = load_corpus(config.corpus_path)

    model = LanguageModel(config.window_length, seed=config.random_seed)
    model.train(corpus)

    generated = model.generate(config.seed_text, config.text_length)
    if generated is None:
        return ""
    if dump:
        return str(model) + generated
    return generated


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        args, _ = build_parser().parse_known_args(argv)
    except ValueError:
        return 0

    config = resolve_config(args)
    if config is None:
        return 0

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        output = run(config, dump=args.dump)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Could not read corpus {config.corpus_path}: {e}")
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
