"""
Command-line interface for Markovian.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from .configuration import apply_overrides, load_configuration_view, parse_overrides
from .domains import get_domain
from .domains.board import build_board_chain, write_walks
from .domains.words import build_word_chain, read_corpus_lines, write_tweets
from .errors import ChainAllocationError, EmptyDomainError
from .models import BoardRunConfiguration, CorpusRunConfiguration
from .randomness import seed_random


def _configure_logger(verbose: bool) -> logging.Logger:
    """
    Configure the command-line interface logger.

    :param verbose: Whether to use debug logging.
    :type verbose: bool
    :return: Configured logger.
    :rtype: logging.Logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
    return logging.getLogger("markovian")


def _add_configuration_args(parser: argparse.ArgumentParser) -> None:
    """
    Add the common --config and --set arguments to a parser.

    :param parser: Argument parser to modify.
    :type parser: argparse.ArgumentParser
    :return: None.
    :rtype: None
    """
    parser.add_argument(
        "--config",
        action="append",
        default=None,
        help="Configuration file (YAML). Repeatable; later files override earlier ones.",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=None,
        help="Configuration override as key=value. Repeatable.",
    )


def _configuration_view(
    arguments: argparse.Namespace, positional: Dict[str, object]
) -> Dict[str, object]:
    """
    Compose configuration files, overrides and positional arguments.

    :param arguments: Parsed command-line interface arguments.
    :type arguments: argparse.Namespace
    :param positional: Positional argument values; None values are ignored.
    :type positional: dict[str, object]
    :return: Composed configuration mapping.
    :rtype: dict[str, object]
    """
    view: Dict[str, object] = {}
    if arguments.config:
        view = load_configuration_view(arguments.config, configuration_label="Configuration file")
    overrides = parse_overrides(arguments.overrides)
    if overrides:
        view = apply_overrides(view, overrides)
    for key, value in positional.items():
        if value is not None:
            view[key] = value
    return view


def cmd_tweets(arguments: argparse.Namespace) -> int:
    """
    Generate sentences from a text corpus.

    :param arguments: Parsed command-line interface arguments.
    :type arguments: argparse.Namespace
    :return: Exit code.
    :rtype: int
    """
    view = _configuration_view(
        arguments,
        {
            "seed": arguments.seed,
            "count": arguments.count,
            "path": arguments.path,
            "word_limit": arguments.word_limit,
        },
    )
    config = CorpusRunConfiguration.model_validate(view)
    lines = read_corpus_lines(Path(config.path))
    seed_random(config.seed)
    with build_word_chain(lines, word_limit=config.word_limit) as chain:
        write_tweets(chain, count=config.count, max_length=config.max_length)
    return 0


def cmd_snakes(arguments: argparse.Namespace) -> int:
    """
    Generate random walks over the snakes and ladders board.

    :param arguments: Parsed command-line interface arguments.
    :type arguments: argparse.Namespace
    :return: Exit code.
    :rtype: int
    """
    view = _configuration_view(arguments, {"seed": arguments.seed, "count": arguments.count})
    config = BoardRunConfiguration.model_validate(view)
    seed_random(config.seed)
    with build_board_chain() as chain:
        write_walks(chain, count=config.count, max_length=config.max_length)
    return 0


def cmd_describe(arguments: argparse.Namespace) -> int:
    """
    Print structural statistics for a built chain as JavaScript Object Notation.

    :param arguments: Parsed command-line interface arguments.
    :type arguments: argparse.Namespace
    :return: Exit code.
    :rtype: int
    """
    if arguments.board:
        if arguments.path is not None:
            raise ValueError("The board summary does not take a corpus path")
        chain = build_board_chain(capabilities=get_domain("board"))
    else:
        if arguments.path is None:
            raise ValueError("The words domain requires a corpus path")
        lines = read_corpus_lines(Path(arguments.path))
        chain = build_word_chain(
            lines, word_limit=arguments.word_limit, capabilities=get_domain("words")
        )
    with chain:
        summary = chain.summary()
    print(json.dumps(summary.model_dump(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line interface argument parser.

    :return: Argument parser instance.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="markovian",
        description="Markovian command-line interface: build Markov chains and sample random walks.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log build and teardown details to standard error."
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_tweets = sub.add_parser("tweets", help="Generate sentences from a text corpus.")
    p_tweets.add_argument("seed", type=int, nargs="?", default=None, help="Random seed.")
    p_tweets.add_argument(
        "count", type=int, nargs="?", default=None, help="Number of sentences to generate."
    )
    p_tweets.add_argument("path", nargs="?", default=None, help="Corpus text file.")
    p_tweets.add_argument(
        "word_limit",
        type=int,
        nargs="?",
        default=None,
        help="Optional number of leading words to read from the corpus.",
    )
    _add_configuration_args(p_tweets)
    p_tweets.set_defaults(func=cmd_tweets)

    p_snakes = sub.add_parser("snakes", help="Generate walks over the snakes and ladders board.")
    p_snakes.add_argument("seed", type=int, nargs="?", default=None, help="Random seed.")
    p_snakes.add_argument(
        "count", type=int, nargs="?", default=None, help="Number of walks to generate."
    )
    _add_configuration_args(p_snakes)
    p_snakes.set_defaults(func=cmd_snakes)

    p_describe = sub.add_parser("describe", help="Print statistics for a built chain.")
    p_describe.add_argument("path", nargs="?", default=None, help="Corpus text file.")
    p_describe.add_argument(
        "word_limit",
        type=int,
        nargs="?",
        default=None,
        help="Optional number of leading words to read from the corpus.",
    )
    p_describe.add_argument(
        "--board",
        action="store_true",
        help="Describe the snakes and ladders board instead of a corpus.",
    )
    p_describe.set_defaults(func=cmd_describe)

    return parser


def main(argument_list: Optional[List[str]] = None) -> int:
    """
    Entry point for the Markovian command-line interface.

    :param argument_list: Optional command-line interface arguments.
    :type argument_list: list[str] or None
    :return: Exit code.
    :rtype: int
    """
    parser = build_parser()
    arguments = parser.parse_args(argument_list)
    _configure_logger(arguments.verbose)
    try:
        return int(arguments.func(arguments))
    except ValidationError as exception:
        print(str(exception), file=sys.stderr)
        return 2
    except (
        FileNotFoundError,
        KeyError,
        ValueError,
        EmptyDomainError,
        ChainAllocationError,
    ) as exception:
        message = exception.args[0] if getattr(exception, "args", None) else str(exception)
        print(str(message), file=sys.stderr)
        return 2
