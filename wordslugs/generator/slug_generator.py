import random
import threading

from wordslugs.core.config import Settings, get_settings
from wordslugs.core.exceptions import InvalidArgument, NoCandidatesError
from wordslugs.core.logging import get_logger
from wordslugs.core.types import CaseStyle, PartOfSpeech
from wordslugs.data.catalog import WordCatalog, get_catalog
from wordslugs.generator.options import SlugOptions
from wordslugs.utils.formatter import format_words

logger = get_logger(__name__)


class SlugGenerator:
    """Generates random word slugs such as "happy-little-cat".

    A generator owns its random source and serializes draws on a lock, so a
    single instance can be shared between threads. Pass a seeded
    ``random.Random`` for reproducible output.

    Words are drawn independently per position, so the same word may appear
    twice in one slug. ``total_unique_slugs`` counts with the same rule.
    """

    def __init__(
        self,
        catalog: WordCatalog | None = None,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else get_catalog()
        self.rng = rng if rng is not None else random.Random()
        self.settings = settings if settings is not None else get_settings()
        self._lock = threading.Lock()

    @property
    def default_word_count(self) -> int:
        return self.settings.generator.default_word_count

    def default_options(self) -> SlugOptions:
        return SlugOptions()

    def resolve_case_style(self, options: SlugOptions | None = None) -> CaseStyle:
        """Case style of ``options``, or the configured default when it has none."""
        if options is not None and options.case_style is not None:
            return options.case_style
        return self.settings.generator.default_case_style

    @staticmethod
    def default_pattern(word_count: int) -> tuple[PartOfSpeech, ...]:
        """(n-1) adjectives followed by one noun."""
        if word_count <= 0:
            raise InvalidArgument("Number of words must be positive")
        return (PartOfSpeech.ADJECTIVE,) * (word_count - 1) + (PartOfSpeech.NOUN,)

    def resolve_pattern(
        self, word_count: int, options: SlugOptions | None = None
    ) -> tuple[PartOfSpeech, ...]:
        """Return the parts of speech to fill, one per word."""
        if word_count <= 0:
            raise InvalidArgument("Number of words must be positive")

        if options is None or not options.has_pattern:
            return self.default_pattern(word_count)

        pattern = options.parts_of_speech
        if len(pattern) != word_count:
            raise InvalidArgument(
                f"Parts of speech pattern length ({len(pattern)}) "
                f"must match number of words ({word_count})"
            )
        return pattern

    def _resolve(
        self, word_count: int | SlugOptions | None, options: SlugOptions | None
    ) -> tuple[tuple[PartOfSpeech, ...], SlugOptions]:
        # generate(options) is accepted as shorthand for generate(None, options)
        if isinstance(word_count, SlugOptions):
            if options is not None:
                raise InvalidArgument("Options were given twice")
            word_count, options = None, word_count

        opts = options if options is not None else self.default_options()
        if word_count is None:
            word_count = (
                len(opts.parts_of_speech) if opts.has_pattern else self.default_word_count
            )
        if isinstance(word_count, bool) or not isinstance(word_count, int):
            raise InvalidArgument(
                f"Number of words must be an integer, got {word_count!r}"
            )
        return self.resolve_pattern(word_count, opts), opts

    def generate(
        self,
        word_count: int | SlugOptions | None = None,
        options: SlugOptions | None = None,
    ) -> str:
        """Generate one slug.

        Args:
            word_count: number of words, defaults to the pattern length of
                ``options`` or the configured default (3). ``SlugOptions`` may
                be passed here instead.
            options: pattern, category filters and case style.

        Raises:
            InvalidArgument: non-positive word count or pattern length mismatch.
            NoCandidatesError: a category filter leaves no words for a position.
        """
        try:
            pattern, opts = self._resolve(word_count, options)
            words = [self._draw(part_of_speech, opts) for part_of_speech in pattern]
        except (InvalidArgument, NoCandidatesError) as e:
            logger.warning(f"Slug generation failed: {e}")
            raise

        case_style = self.resolve_case_style(opts)
        slug = format_words(words, case_style)
        logger.debug(
            "Generated slug",
            extra={
                "pattern": [p.value for p in pattern],
                "case_style": case_style.value,
                "word_count": len(pattern),
            },
        )
        return slug

    def generate_many(
        self,
        count: int,
        word_count: int | SlugOptions | None = None,
        options: SlugOptions | None = None,
    ) -> list[str]:
        """Generate ``count`` independent slugs with the same settings."""
        if count <= 0:
            raise InvalidArgument("Number of slugs must be positive")
        return [self.generate(word_count, options) for _ in range(count)]

    def total_unique_slugs(
        self,
        word_count: int | SlugOptions | None = None,
        options: SlugOptions | None = None,
    ) -> int:
        """Number of distinct word sequences ``generate`` can produce.

        Python integers do not overflow, so large patterns are counted exactly.
        """
        pattern, opts = self._resolve(word_count, options)

        combinations = 1
        for part_of_speech in pattern:
            combinations *= self.catalog.count_of(
                part_of_speech, opts.categories_for(part_of_speech)
            )
        return combinations

    def _draw(self, part_of_speech: PartOfSpeech, options: SlugOptions) -> str:
        categories = options.categories_for(part_of_speech)
        candidates = self.catalog.select(part_of_speech, categories)
        if not candidates:
            raise NoCandidatesError(part_of_speech, categories)

        with self._lock:
            entry = self.rng.choice(candidates)
        return entry.word


_default_generator: SlugGenerator | None = None
_default_lock = threading.Lock()


def get_generator() -> SlugGenerator:
    """Return the shared default generator, creating it on first use."""
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = SlugGenerator()
        return _default_generator


def generate_slug(
    word_count: int | SlugOptions | None = None, options: SlugOptions | None = None
) -> str:
    """Generate a slug with the shared default generator."""
    return get_generator().generate(word_count, options)


def total_unique_slugs(
    word_count: int | SlugOptions | None = None, options: SlugOptions | None = None
) -> int:
    return get_generator().total_unique_slugs(word_count, options)
