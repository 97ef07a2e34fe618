from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache

from wordslugs.core.exceptions import ConfigurationError
from wordslugs.core.types import Category, PartOfSpeech
from wordslugs.models.word import WordEntry
from wordslugs.utils import category_filter


class WordCatalog:
    """Read-only word tables keyed by part of speech.

    The catalog does no filtering of its own; selection and counting both
    delegate to ``category_filter`` so they always agree.
    """

    def __init__(self, tables: Mapping[PartOfSpeech, Iterable[WordEntry]]) -> None:
        self._tables: dict[PartOfSpeech, tuple[WordEntry, ...]] = {
            PartOfSpeech(pos): tuple(entries) for pos, entries in tables.items()
        }

    @property
    def parts_of_speech(self) -> tuple[PartOfSpeech, ...]:
        return tuple(self._tables)

    def words_of(self, part_of_speech: PartOfSpeech) -> tuple[WordEntry, ...]:
        """Return every entry for ``part_of_speech`` in catalog order."""
        entries = self._tables.get(part_of_speech)
        if not entries:
            raise ConfigurationError(
                f"Word catalog has no entries for {part_of_speech.value}"
            )
        return entries

    def select(
        self,
        part_of_speech: PartOfSpeech,
        categories: Iterable[Category] | None = None,
    ) -> list[WordEntry]:
        return category_filter.select(self.words_of(part_of_speech), categories)

    def count_of(
        self,
        part_of_speech: PartOfSpeech,
        categories: Iterable[Category] | None = None,
    ) -> int:
        return category_filter.count(self.words_of(part_of_speech), categories)

    def words_by_category(
        self,
        part_of_speech: PartOfSpeech,
        categories: Iterable[Category] | None = None,
    ) -> list[str]:
        return [entry.word for entry in self.select(part_of_speech, categories)]

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._tables.values())

    def __repr__(self) -> str:
        sizes = ", ".join(
            f"{pos.value}={len(entries)}" for pos, entries in self._tables.items()
        )
        return f"WordCatalog({sizes})"


def build_catalog(
    nouns: Sequence[WordEntry], adjectives: Sequence[WordEntry]
) -> WordCatalog:
    return WordCatalog({PartOfSpeech.NOUN: nouns, PartOfSpeech.ADJECTIVE: adjectives})


@lru_cache
def get_catalog() -> WordCatalog:
    """Return the process-wide catalog built from the seed words."""
    from wordslugs.core.config import get_settings
    from wordslugs.core.config_validator import CatalogValidator
    from wordslugs.data.words import ADJECTIVES, NOUNS

    catalog = build_catalog(NOUNS, ADJECTIVES)
    if get_settings().catalog.validate_on_load:
        CatalogValidator(catalog).validate_all()
    return catalog
