from enum import Enum


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    ADJECTIVE = "adjective"


class CaseStyle(str, Enum):
    """Output casing applied to the generated words.

    KEBAB: "happy-little-cat"
    CAMEL: "happyLittleCat"
    TITLE: "Happy Little Cat"
    LOWER: "happy little cat"
    SENTENCE: "Happy little cat"
    """

    KEBAB = "kebab"
    CAMEL = "camel"
    TITLE = "title"
    LOWER = "lower"
    SENTENCE = "sentence"


class Category(str, Enum):
    # People & social
    PEOPLE = "people"
    FAMILY = "family"
    PROFESSION = "profession"

    # Places
    PLACE = "place"

    # Animals & nature
    ANIMALS = "animals"

    # Food & dining
    FOOD = "food"

    TECHNOLOGY = "technology"
    TRANSPORTATION = "transportation"

    # Activities & concepts
    THING = "thing"
    SPORTS = "sports"
    MEDIA = "media"
    EDUCATION = "education"
    BUSINESS = "business"
    HEALTH = "health"
    RELIGION = "religion"
    SCIENCE = "science"

    TIME = "time"

    # Adjective-only
    APPEARANCE = "appearance"
    PERSONALITY = "personality"
    CONDITION = "condition"
    SIZE = "size"
    COLOR = "color"
    SHAPES = "shapes"
    QUANTITY = "quantity"
    TASTE = "taste"
    TOUCH = "touch"
    SOUNDS = "sounds"


ADJECTIVE_CATEGORIES = frozenset(
    {
        Category.APPEARANCE,
        Category.PERSONALITY,
        Category.CONDITION,
        Category.SIZE,
        Category.COLOR,
        Category.SHAPES,
        Category.QUANTITY,
        Category.TASTE,
        Category.TOUCH,
        Category.SOUNDS,
    }
)
