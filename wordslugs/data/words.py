"""Seed words for the default catalog.

Every word appears at most once per table. Adjective-only categories
(see ``ADJECTIVE_CATEGORIES``) are never used for nouns.
"""

from wordslugs.core.types import Category as C
from wordslugs.models.word import WordEntry

w = WordEntry.of

NOUNS: tuple[WordEntry, ...] = (
    # People
    w("artist", C.PEOPLE, C.PROFESSION),
    w("baby", C.PEOPLE, C.FAMILY),
    w("brother", C.PEOPLE, C.FAMILY),
    w("child", C.PEOPLE, C.FAMILY),
    w("doctor", C.PEOPLE, C.PROFESSION, C.HEALTH),
    w("farmer", C.PEOPLE, C.PROFESSION),
    w("father", C.PEOPLE, C.FAMILY),
    w("friend", C.PEOPLE),
    w("lawyer", C.PEOPLE, C.PROFESSION, C.BUSINESS),
    w("mother", C.PEOPLE, C.FAMILY),
    w("nurse", C.PEOPLE, C.PROFESSION, C.HEALTH),
    w("pilot", C.PEOPLE, C.PROFESSION, C.TRANSPORTATION),
    w("priest", C.PEOPLE, C.PROFESSION, C.RELIGION),
    w("scientist", C.PEOPLE, C.PROFESSION, C.SCIENCE),
    w("sister", C.PEOPLE, C.FAMILY),
    w("student", C.PEOPLE, C.EDUCATION),
    w("teacher", C.PEOPLE, C.PROFESSION, C.EDUCATION),
    # Places
    w("airport", C.TRANSPORTATION, C.PLACE),
    w("beach", C.PLACE),
    w("church", C.PLACE, C.RELIGION),
    w("city", C.PLACE),
    w("forest", C.PLACE),
    w("hospital", C.PLACE, C.HEALTH),
    w("island", C.PLACE),
    w("kitchen", C.PLACE, C.FOOD),
    w("library", C.PLACE, C.EDUCATION),
    w("market", C.PLACE, C.BUSINESS, C.FOOD),
    w("mountain", C.PLACE),
    w("office", C.PLACE, C.BUSINESS),
    w("park", C.PLACE),
    w("river", C.PLACE),
    w("school", C.PLACE, C.EDUCATION),
    w("stadium", C.PLACE, C.SPORTS),
    w("station", C.PLACE, C.TRANSPORTATION),
    w("university", C.PLACE, C.EDUCATION),
    # Animals
    w("bear", C.ANIMALS),
    w("bird", C.ANIMALS),
    w("cat", C.ANIMALS),
    w("dog", C.ANIMALS),
    w("dolphin", C.ANIMALS),
    w("eagle", C.ANIMALS),
    w("elephant", C.ANIMALS),
    w("fish", C.ANIMALS, C.FOOD),
    w("fox", C.ANIMALS),
    w("horse", C.ANIMALS, C.TRANSPORTATION),
    w("lion", C.ANIMALS),
    w("monkey", C.ANIMALS),
    w("owl", C.ANIMALS),
    w("penguin", C.ANIMALS),
    w("rabbit", C.ANIMALS),
    w("tiger", C.ANIMALS),
    w("turtle", C.ANIMALS),
    w("whale", C.ANIMALS),
    w("wolf", C.ANIMALS),
    # Food
    w("apple", C.FOOD),
    w("banana", C.FOOD),
    w("bread", C.FOOD),
    w("cake", C.FOOD),
    w("cheese", C.FOOD),
    w("cookie", C.FOOD),
    w("lemon", C.FOOD),
    w("noodle", C.FOOD),
    w("pizza", C.FOOD),
    w("soup", C.FOOD),
    w("taco", C.FOOD),
    # Technology
    w("camera", C.TECHNOLOGY, C.MEDIA),
    w("computer", C.TECHNOLOGY),
    w("keyboard", C.TECHNOLOGY),
    w("laptop", C.TECHNOLOGY),
    w("phone", C.TECHNOLOGY),
    w("printer", C.TECHNOLOGY, C.BUSINESS),
    w("robot", C.TECHNOLOGY, C.SCIENCE),
    w("server", C.TECHNOLOGY),
    w("software", C.TECHNOLOGY),
    # Transportation
    w("bicycle", C.TRANSPORTATION, C.SPORTS),
    w("boat", C.TRANSPORTATION),
    w("bus", C.TRANSPORTATION),
    w("car", C.TRANSPORTATION),
    w("plane", C.TRANSPORTATION),
    w("rocket", C.TRANSPORTATION, C.SCIENCE),
    w("train", C.TRANSPORTATION),
    w("truck", C.TRANSPORTATION),
    # Things and concepts
    w("ball", C.THING, C.SPORTS),
    w("book", C.THING, C.EDUCATION, C.MEDIA),
    w("chair", C.THING),
    w("guitar", C.THING, C.MEDIA),
    w("lamp", C.THING),
    w("pencil", C.THING, C.EDUCATION),
    w("umbrella", C.THING),
    w("football", C.SPORTS),
    w("tennis", C.SPORTS),
    w("marathon", C.SPORTS),
    w("movie", C.MEDIA),
    w("newspaper", C.MEDIA),
    w("podcast", C.MEDIA, C.TECHNOLOGY),
    w("lesson", C.EDUCATION),
    w("budget", C.BUSINESS),
    w("company", C.BUSINESS),
    w("invoice", C.BUSINESS),
    w("medicine", C.HEALTH, C.SCIENCE),
    w("vitamin", C.HEALTH, C.FOOD),
    w("prayer", C.RELIGION),
    w("temple", C.RELIGION, C.PLACE),
    w("atom", C.SCIENCE),
    w("comet", C.SCIENCE),
    w("galaxy", C.SCIENCE),
    w("planet", C.SCIENCE),
    # Time
    w("afternoon", C.TIME),
    w("century", C.TIME),
    w("morning", C.TIME),
    w("night", C.TIME),
    w("season", C.TIME),
    w("weekend", C.TIME),
)

ADJECTIVES: tuple[WordEntry, ...] = (
    # Appearance
    w("beautiful", C.APPEARANCE),
    w("clean", C.APPEARANCE, C.CONDITION),
    w("elegant", C.APPEARANCE),
    w("fancy", C.APPEARANCE),
    w("plain", C.APPEARANCE),
    w("shiny", C.APPEARANCE, C.TOUCH),
    w("sparkling", C.APPEARANCE),
    # Personality
    w("brave", C.PERSONALITY),
    w("calm", C.PERSONALITY),
    w("clever", C.PERSONALITY),
    w("eager", C.PERSONALITY),
    w("gentle", C.PERSONALITY, C.TOUCH),
    w("happy", C.PERSONALITY),
    w("jolly", C.PERSONALITY),
    w("kind", C.PERSONALITY),
    w("lazy", C.PERSONALITY),
    w("proud", C.PERSONALITY),
    w("silly", C.PERSONALITY),
    w("witty", C.PERSONALITY),
    # Condition
    w("busy", C.CONDITION),
    w("broken", C.CONDITION),
    w("fresh", C.CONDITION, C.TASTE),
    w("new", C.CONDITION),
    w("old", C.CONDITION),
    w("rich", C.CONDITION, C.TASTE),
    w("tired", C.CONDITION),
    # Size
    w("big", C.SIZE),
    w("giant", C.SIZE),
    w("huge", C.SIZE),
    w("little", C.SIZE),
    w("long", C.SIZE, C.SHAPES),
    w("short", C.SIZE),
    w("small", C.SIZE),
    w("tall", C.SIZE),
    w("tiny", C.SIZE),
    # Color
    w("black", C.COLOR),
    w("blue", C.COLOR),
    w("brown", C.COLOR),
    w("golden", C.COLOR, C.APPEARANCE),
    w("green", C.COLOR),
    w("orange", C.COLOR),
    w("pink", C.COLOR),
    w("purple", C.COLOR),
    w("red", C.COLOR),
    w("silver", C.COLOR, C.APPEARANCE),
    w("white", C.COLOR),
    w("yellow", C.COLOR),
    # Shapes
    w("curved", C.SHAPES),
    w("flat", C.SHAPES, C.TOUCH),
    w("round", C.SHAPES),
    w("square", C.SHAPES),
    w("straight", C.SHAPES),
    w("wide", C.SHAPES, C.SIZE),
    # Quantity
    w("empty", C.QUANTITY, C.CONDITION),
    w("few", C.QUANTITY),
    w("full", C.QUANTITY, C.CONDITION),
    w("many", C.QUANTITY),
    w("single", C.QUANTITY),
    # Taste
    w("bitter", C.TASTE),
    w("juicy", C.TASTE),
    w("salty", C.TASTE),
    w("sour", C.TASTE),
    w("spicy", C.TASTE),
    w("sweet", C.TASTE, C.PERSONALITY),
    w("tasty", C.TASTE),
    # Touch
    w("cold", C.TOUCH, C.CONDITION),
    w("fluffy", C.TOUCH),
    w("hard", C.TOUCH),
    w("rough", C.TOUCH),
    w("smooth", C.TOUCH),
    w("soft", C.TOUCH),
    w("warm", C.TOUCH),
    # Sounds
    w("loud", C.SOUNDS),
    w("noisy", C.SOUNDS),
    w("quiet", C.SOUNDS, C.PERSONALITY),
    w("silent", C.SOUNDS),
    w("squeaky", C.SOUNDS),
)
