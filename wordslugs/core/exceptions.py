"""Errors raised by slug generation."""

from collections.abc import Iterable

from wordslugs.core.types import Category, PartOfSpeech


class SlugError(Exception):
    """Base class for every error raised by this package."""

    pass


class InvalidArgument(SlugError, ValueError):
    """Raised for caller mistakes such as a non-positive word count."""

    pass


class NoCandidatesError(SlugError):
    """Raised when a part of speech has no words left after filtering."""

    def __init__(
        self,
        part_of_speech: PartOfSpeech,
        categories: Iterable[Category] | None = None,
    ) -> None:
        self.part_of_speech = part_of_speech
        self.categories = (
            sorted(categories, key=lambda c: c.value) if categories else []
        )
        requested = ", ".join(c.value for c in self.categories) or "any"
        super().__init__(
            f"No words available for {part_of_speech.value} "
            f"with categories [{requested}]"
        )


class ConfigurationError(SlugError):
    """Raised when the word catalog or settings are unusable."""

    pass
