from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from wordslugs.core.types import CaseStyle, Category, PartOfSpeech
from wordslugs.utils.formatter import parse_case_style

CategoryFilters = tuple[tuple[PartOfSpeech, frozenset[Category]], ...]


class SlugOptions(BaseModel):
    """Immutable settings for one or many ``generate`` calls.

    An empty ``parts_of_speech`` means the pattern is derived from the word
    count. Parts of speech missing from ``categories`` are unrestricted, and
    a missing ``case_style`` means the configured default is used.

    ``categories`` accepts a mapping and is stored as ``(part_of_speech,
    categories)`` pairs ordered by part of speech, which keeps the model
    hashable and serializable.
    """

    model_config = ConfigDict(frozen=True)

    parts_of_speech: tuple[PartOfSpeech, ...] = ()
    categories: CategoryFilters = ()
    case_style: CaseStyle | None = None

    @field_validator("categories", mode="before")
    @classmethod
    def categories_from_mapping(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    @field_validator("categories", mode="after")
    @classmethod
    def order_categories(cls, v: CategoryFilters) -> CategoryFilters:
        # Later pairs win, as with dict construction
        return tuple(sorted(dict(v).items(), key=lambda item: item[0].value))

    @property
    def has_pattern(self) -> bool:
        return bool(self.parts_of_speech)

    def categories_for(self, part_of_speech: PartOfSpeech) -> frozenset[Category] | None:
        """Category filter for ``part_of_speech``, or None when unrestricted."""
        return dict(self.categories).get(part_of_speech) or None

    @classmethod
    def builder(cls) -> "SlugOptionsBuilder":
        return SlugOptionsBuilder()


class SlugOptionsBuilder:
    """Fluent construction of ``SlugOptions``.

    >>> options = (
    ...     SlugOptions.builder()
    ...     .with_noun_categories(Category.ANIMALS)
    ...     .with_adjective_categories(Category.COLOR)
    ...     .case_style(CaseStyle.TITLE)
    ...     .build()
    ... )
    """

    def __init__(self) -> None:
        self._parts_of_speech: list[PartOfSpeech] = []
        self._categories: dict[PartOfSpeech, frozenset[Category]] = {}
        self._case_style: CaseStyle | None = None

    def parts_of_speech(
        self, *parts: PartOfSpeech | Iterable[PartOfSpeech]
    ) -> "SlugOptionsBuilder":
        """Set the pattern, e.g. ``parts_of_speech(ADJECTIVE, ADJECTIVE, NOUN)``.

        A single iterable of parts of speech is accepted as well.
        """
        if len(parts) == 1 and not isinstance(parts[0], (str, PartOfSpeech)):
            parts = tuple(parts[0])
        self._parts_of_speech = [PartOfSpeech(part) for part in parts]
        return self

    def with_categories(
        self, part_of_speech: PartOfSpeech, *categories: Category
    ) -> "SlugOptionsBuilder":
        """Only pick words with at least one of ``categories`` for this part of speech."""
        self._categories[PartOfSpeech(part_of_speech)] = frozenset(
            Category(category) for category in categories
        )
        return self

    def with_noun_categories(self, *categories: Category) -> "SlugOptionsBuilder":
        return self.with_categories(PartOfSpeech.NOUN, *categories)

    def with_adjective_categories(self, *categories: Category) -> "SlugOptionsBuilder":
        return self.with_categories(PartOfSpeech.ADJECTIVE, *categories)

    def case_style(self, case_style: CaseStyle | None) -> "SlugOptionsBuilder":
        """Set the output style; None falls back to the configured default."""
        self._case_style = None if case_style is None else parse_case_style(case_style)
        return self

    def build(self) -> SlugOptions:
        return SlugOptions(
            parts_of_speech=tuple(self._parts_of_speech),
            categories=dict(self._categories),
            case_style=self._case_style,
        )
