"""Human-readable random word slugs such as "happy-little-cat"."""

from wordslugs.core.exceptions import (
    ConfigurationError,
    InvalidArgument,
    NoCandidatesError,
    SlugError,
)
from wordslugs.core.types import CaseStyle, Category, PartOfSpeech
from wordslugs.data.catalog import WordCatalog, get_catalog
from wordslugs.generator.options import SlugOptions, SlugOptionsBuilder
from wordslugs.generator.slug_generator import (
    SlugGenerator,
    generate_slug,
    total_unique_slugs,
)
from wordslugs.models.word import WordEntry
from wordslugs.utils.formatter import format_words

__version__ = "0.1.0"

__all__ = [
    "CaseStyle",
    "Category",
    "ConfigurationError",
    "InvalidArgument",
    "NoCandidatesError",
    "PartOfSpeech",
    "SlugError",
    "SlugGenerator",
    "SlugOptions",
    "SlugOptionsBuilder",
    "WordCatalog",
    "WordEntry",
    "format_words",
    "generate_slug",
    "get_catalog",
    "total_unique_slugs",
]
