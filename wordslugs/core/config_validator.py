from collections import Counter

from wordslugs.core.exceptions import ConfigurationError
from wordslugs.core.logging import get_logger
from wordslugs.core.types import PartOfSpeech
from wordslugs.data.catalog import WordCatalog

logger = get_logger(__name__)


class CatalogValidator:
    """Checks a word catalog before it is used for generation."""

    def __init__(
        self,
        catalog: WordCatalog,
        required: tuple[PartOfSpeech, ...] = tuple(PartOfSpeech),
    ) -> None:
        self.catalog = catalog
        self.required = required
        self.errors: list[str] = []

    def validate_all(self) -> None:
        """Run all catalog validations and raise if any failed."""
        logger.info("Starting catalog validation...")
        self.errors = []

        for part_of_speech in self.required:
            self._validate_table(part_of_speech)

        if self.errors:
            error_message = "Catalog validation failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
            logger.error(error_message)
            raise ConfigurationError(error_message)

        logger.info(f"Catalog validation completed successfully: {self.catalog!r}")

    def _validate_table(self, part_of_speech: PartOfSpeech) -> None:
        try:
            entries = self.catalog.words_of(part_of_speech)
        except ConfigurationError as e:
            self.errors.append(str(e))
            return

        self._validate_unique_words(part_of_speech, [e.word for e in entries])
        self._validate_single_tokens(part_of_speech, [e.word for e in entries])

    def _validate_unique_words(
        self, part_of_speech: PartOfSpeech, words: list[str]
    ) -> None:
        duplicates = sorted(word for word, n in Counter(words).items() if n > 1)
        if duplicates:
            self.errors.append(
                f"Duplicate {part_of_speech.value} words: {', '.join(duplicates)}"
            )

    def _validate_single_tokens(
        self, part_of_speech: PartOfSpeech, words: list[str]
    ) -> None:
        # Formatted slugs are split on separators, so a word must not contain one
        invalid = sorted(word for word in words if len(word.split()) != 1 or "-" in word)
        if invalid:
            self.errors.append(
                f"{part_of_speech.value.capitalize()} words must be single tokens: "
                f"{', '.join(invalid)}"
            )
