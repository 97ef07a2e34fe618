"""Tests for SlugOptions and its builder."""

import json

import pytest
from pydantic import ValidationError

from wordslugs.core.exceptions import InvalidArgument
from wordslugs.core.types import CaseStyle, Category, PartOfSpeech
from wordslugs.generator.options import SlugOptions, SlugOptionsBuilder

NOUN = PartOfSpeech.NOUN
ADJECTIVE = PartOfSpeech.ADJECTIVE


def test_defaults():
    """Test that an empty builder gives unrestricted options without a pattern."""
    options = SlugOptions.builder().build()
    assert options.parts_of_speech == ()
    assert not options.has_pattern
    assert options.categories == ()
    assert options.case_style is None


def test_builder_returns_builder():
    """Test that SlugOptions.builder returns a fresh builder."""
    assert isinstance(SlugOptions.builder(), SlugOptionsBuilder)


def test_parts_of_speech_varargs():
    """Test setting the pattern from positional arguments."""
    options = SlugOptions.builder().parts_of_speech(ADJECTIVE, NOUN).build()
    assert options.parts_of_speech == (ADJECTIVE, NOUN)
    assert options.has_pattern


def test_parts_of_speech_from_list():
    """Test setting the pattern from a single list."""
    options = SlugOptions.builder().parts_of_speech([NOUN, ADJECTIVE, NOUN]).build()
    assert options.parts_of_speech == (NOUN, ADJECTIVE, NOUN)


def test_parts_of_speech_from_values():
    """Test setting the pattern from enum values."""
    options = SlugOptions.builder().parts_of_speech("adjective", "noun").build()
    assert options.parts_of_speech == (ADJECTIVE, NOUN)


def test_noun_and_adjective_categories():
    """Test the noun and adjective category shortcuts."""
    options = (
        SlugOptions.builder()
        .with_noun_categories(Category.ANIMALS, Category.FOOD)
        .with_adjective_categories(Category.COLOR)
        .build()
    )
    assert options.categories_for(NOUN) == {Category.ANIMALS, Category.FOOD}
    assert options.categories_for(ADJECTIVE) == {Category.COLOR}


def test_with_categories_replaces_previous():
    """Test that a second call for the same part of speech wins."""
    options = (
        SlugOptions.builder()
        .with_categories(NOUN, Category.ANIMALS)
        .with_categories(NOUN, Category.TECHNOLOGY)
        .build()
    )
    assert options.categories_for(NOUN) == {Category.TECHNOLOGY}


def test_unrestricted_part_of_speech():
    """Test that a part of speech without a filter is unrestricted."""
    options = SlugOptions.builder().with_noun_categories(Category.ANIMALS).build()
    assert options.categories_for(ADJECTIVE) is None


def test_empty_category_list_is_unrestricted():
    """Test that an empty category list means no restriction."""
    options = SlugOptions.builder().with_noun_categories().build()
    assert options.categories_for(NOUN) is None


def test_case_style():
    """Test setting the case style."""
    options = SlugOptions.builder().case_style(CaseStyle.SENTENCE).build()
    assert options.case_style == CaseStyle.SENTENCE


def test_case_style_can_be_cleared():
    """Test that None restores the configured default style."""
    options = SlugOptions.builder().case_style(CaseStyle.TITLE).case_style(None).build()
    assert options.case_style is None


def test_order_of_calls_does_not_matter():
    """Test that builder calls can be made in any order."""
    a = (
        SlugOptions.builder()
        .case_style(CaseStyle.TITLE)
        .with_adjective_categories(Category.COLOR)
        .with_noun_categories(Category.ANIMALS)
        .parts_of_speech(ADJECTIVE, NOUN)
        .build()
    )
    b = (
        SlugOptions.builder()
        .parts_of_speech(ADJECTIVE, NOUN)
        .with_noun_categories(Category.ANIMALS)
        .with_adjective_categories(Category.COLOR)
        .case_style(CaseStyle.TITLE)
        .build()
    )
    assert a == b
    assert hash(a) == hash(b)


def test_built_options_do_not_see_later_builder_changes():
    """Test that built options are detached from their builder."""
    builder = SlugOptions.builder().parts_of_speech(NOUN).with_noun_categories(Category.FOOD)
    options = builder.build()

    builder.parts_of_speech(ADJECTIVE, NOUN).with_noun_categories(Category.ANIMALS)

    assert options.parts_of_speech == (NOUN,)
    assert options.categories_for(NOUN) == {Category.FOOD}


def test_builder_can_build_twice():
    """Test that one builder can produce several equal options."""
    builder = SlugOptions.builder().case_style(CaseStyle.CAMEL)
    assert builder.build() == builder.build()
    assert builder.build() is not builder.build()


def test_options_are_frozen():
    """Test that fields cannot be reassigned."""
    options = SlugOptions.builder().build()
    with pytest.raises(ValidationError):
        options.case_style = CaseStyle.TITLE


def test_options_are_hashable():
    """Test that options can be used as dict keys and in sets."""
    options = SlugOptions.builder().with_noun_categories(Category.ANIMALS).build()
    cache = {options: "animals"}
    same = SlugOptions.builder().with_noun_categories(Category.ANIMALS).build()
    assert cache[same] == "animals"


def test_options_serialize_to_json():
    """Test JSON serialization and parsing back."""
    options = (
        SlugOptions.builder()
        .parts_of_speech(ADJECTIVE, NOUN)
        .with_noun_categories(Category.ANIMALS)
        .case_style(CaseStyle.CAMEL)
        .build()
    )

    data = json.loads(options.model_dump_json())

    assert data == {
        "parts_of_speech": ["adjective", "noun"],
        "categories": [["noun", ["animals"]]],
        "case_style": "camel",
    }
    assert SlugOptions.model_validate_json(options.model_dump_json()) == options


def test_categories_stored_in_part_of_speech_order():
    """Test that category pairs are sorted regardless of insertion order."""
    options = SlugOptions(
        categories={
            NOUN: frozenset({Category.ANIMALS}),
            ADJECTIVE: frozenset({Category.COLOR}),
        }
    )
    assert [part for part, _ in options.categories] == [ADJECTIVE, NOUN]


def test_categories_copied_from_caller():
    """Test that changes to the caller's mapping are not seen."""
    categories = {NOUN: frozenset({Category.ANIMALS})}
    options = SlugOptions(categories=categories)
    categories[ADJECTIVE] = frozenset({Category.COLOR})
    assert options.categories_for(ADJECTIVE) is None


def test_direct_construction_parses_values():
    """Test constructing options from plain values."""
    options = SlugOptions(
        parts_of_speech=["adjective", "noun"],
        categories={"noun": ["animals"]},
        case_style="camel",
    )
    assert options.parts_of_speech == (ADJECTIVE, NOUN)
    assert options.categories_for(NOUN) == {Category.ANIMALS}
    assert options.case_style == CaseStyle.CAMEL


def test_invalid_case_style():
    """Test that an unknown style raises InvalidArgument."""
    with pytest.raises(InvalidArgument, match="Unknown case style"):
        SlugOptions.builder().case_style("shouting")
