"""Join generated words into a single string in one of the supported case styles."""

from collections.abc import Sequence

from wordslugs.core.exceptions import InvalidArgument
from wordslugs.core.types import CaseStyle

SEPARATORS = {
    CaseStyle.KEBAB: "-",
    CaseStyle.CAMEL: "",
    CaseStyle.TITLE: " ",
    CaseStyle.LOWER: " ",
    CaseStyle.SENTENCE: " ",
}


def parse_case_style(value: CaseStyle | str) -> CaseStyle:
    try:
        return CaseStyle(value)
    except ValueError as e:
        valid = ", ".join(style.value for style in CaseStyle)
        raise InvalidArgument(
            f"Unknown case style {value!r}, expected one of: {valid}"
        ) from e


def capitalize(word: str) -> str:
    """Uppercase the first character and lowercase the rest.

    Unlike ``str.capitalize`` a single character is simply uppercased, which
    matters for characters whose title case differs from their upper case.
    """
    if not word:
        return word
    if len(word) == 1:
        return word.upper()
    return word[0].upper() + word[1:].lower()


def format_words(words: Sequence[str] | None, case_style: CaseStyle) -> str:
    """Format ``words`` according to ``case_style``.

    >>> format_words(["happy", "little", "cat"], CaseStyle.TITLE)
    'Happy Little Cat'
    >>> format_words(["HAPPY", "LITTLE", "CAT"], CaseStyle.CAMEL)
    'happyLittleCat'
    """
    if not words:
        raise InvalidArgument("Words list cannot be empty")

    case_style = parse_case_style(case_style)
    separator = SEPARATORS[case_style]

    if case_style in (CaseStyle.KEBAB, CaseStyle.LOWER):
        parts = [word.lower() for word in words]
    elif case_style == CaseStyle.TITLE:
        parts = [capitalize(word) for word in words]
    elif case_style == CaseStyle.CAMEL:
        parts = [words[0].lower()] + [capitalize(word) for word in words[1:]]
    else:
        parts = [capitalize(words[0])] + [word.lower() for word in words[1:]]

    return separator.join(parts)

