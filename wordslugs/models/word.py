from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wordslugs.core.types import Category
from wordslugs.utils.category_filter import matches


class WordEntry(BaseModel):
    """A catalog word and the categories it belongs to."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(min_length=1)
    categories: frozenset[Category] = Field(min_length=1)

    @field_validator("word")
    @classmethod
    def validate_word(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("word cannot be blank")
        return v

    @classmethod
    def of(cls, word: str, *categories: Category) -> "WordEntry":
        """Shorthand used by the seed tables: ``WordEntry.of("cat", Category.ANIMALS)``."""
        return cls(word=word, categories=frozenset(categories))

    def has_any_category(self, targets: Iterable[Category] | None) -> bool:
        return matches(self.categories, targets)

    def __str__(self) -> str:
        return self.word
