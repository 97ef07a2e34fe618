"""
Random word slugs

Prints one or more generated slugs, or the number of distinct slugs a
configuration can produce.
"""

import argparse
import os
import random
import sys

from wordslugs.core.config import CONFIG_FILE_ENV, get_settings
from wordslugs.core.exceptions import SlugError
from wordslugs.core.logging import AppLogger, get_logger
from wordslugs.core.types import CaseStyle, Category, PartOfSpeech
from wordslugs.generator.options import SlugOptions
from wordslugs.generator.slug_generator import SlugGenerator


def _parse_pattern(value: str) -> list[PartOfSpeech]:
    try:
        return [PartOfSpeech(part.strip().lower()) for part in value.split(",")]
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"pattern must be a comma separated list of "
            f"{', '.join(p.value for p in PartOfSpeech)}"
        ) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordslugs", description="Generate random word slugs"
    )
    parser.add_argument("-w", "--words", type=int, help="Number of words per slug")
    parser.add_argument(
        "-p",
        "--pattern",
        type=_parse_pattern,
        help="Parts of speech to use, e.g. adjective,adjective,noun",
    )
    parser.add_argument(
        "--noun-category",
        action="append",
        default=[],
        type=Category,
        choices=list(Category),
        metavar="CATEGORY",
        help="Only use nouns from this category (repeatable)",
    )
    parser.add_argument(
        "--adjective-category",
        action="append",
        default=[],
        type=Category,
        choices=list(Category),
        metavar="CATEGORY",
        help="Only use adjectives from this category (repeatable)",
    )
    parser.add_argument(
        "-c",
        "--case",
        type=CaseStyle,
        choices=list(CaseStyle),
        metavar="STYLE",
        help=f"Output case style: {', '.join(s.value for s in CaseStyle)}",
    )
    parser.add_argument(
        "-n", "--count", type=int, default=1, help="Number of slugs to print"
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument(
        "--total",
        action="store_true",
        help="Print the number of unique slugs instead of generating",
    )
    parser.add_argument("--config", type=str, help="Path to config file")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set environment variable for config file if specified
    if args.config:
        config_path = os.path.abspath(args.config)
        if not os.path.exists(config_path):
            parser.error(f"config file not found: {args.config}")
        os.environ[CONFIG_FILE_ENV] = config_path

        get_settings.cache_clear()
        AppLogger.reset()

    settings = get_settings()
    logger = get_logger(__name__)
    logger.debug(f"Using settings: {settings.model_dump()}")
    max_words = settings.generator.max_word_count
    if args.words is not None and args.words > max_words:
        parser.error(f"--words cannot exceed {max_words}")
    if args.pattern and len(args.pattern) > max_words:
        parser.error(f"--pattern cannot have more than {max_words} parts")

    builder = SlugOptions.builder().case_style(args.case)
    if args.pattern:
        builder.parts_of_speech(args.pattern)
    if args.noun_category:
        builder.with_noun_categories(*args.noun_category)
    if args.adjective_category:
        builder.with_adjective_categories(*args.adjective_category)
    options = builder.build()

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        generator = SlugGenerator(rng=rng, settings=settings)
        if args.total:
            print(generator.total_unique_slugs(args.words, options))
        else:
            for slug in generator.generate_many(args.count, args.words, options):
                print(slug)
    except SlugError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0
