import random

import pytest

from wordslugs.core.config import Settings, get_settings
from wordslugs.core.types import Category, PartOfSpeech
from wordslugs.data.catalog import WordCatalog, get_catalog
from wordslugs.generator.slug_generator import SlugGenerator
from wordslugs.models.word import WordEntry


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test load settings from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_catalog():
    """Three adjectives and two nouns."""
    return WordCatalog(
        {
            PartOfSpeech.ADJECTIVE: [
                WordEntry.of("happy", Category.PERSONALITY),
                WordEntry.of("big", Category.SIZE),
                WordEntry.of("blue", Category.COLOR),
            ],
            PartOfSpeech.NOUN: [
                WordEntry.of("cat", Category.ANIMALS),
                WordEntry.of("dog", Category.ANIMALS),
            ],
        }
    )


@pytest.fixture
def small_generator(small_catalog):
    return SlugGenerator(catalog=small_catalog, rng=random.Random(1234), settings=Settings())


@pytest.fixture
def generator():
    """Generator over the default catalog with a fixed seed."""
    return SlugGenerator(catalog=get_catalog(), rng=random.Random(42), settings=Settings())
