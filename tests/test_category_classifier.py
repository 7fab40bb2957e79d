"""Tests for CategoryClassifier: priority-weighted category selection."""

from __future__ import annotations

import pytest

from pixabay_search.application.image_search.classifier import CategoryClassifier
from pixabay_search.application.image_search.vocabulary import CATEGORY_KEYWORDS
from pixabay_search.domain.entities.image import PixabayCategory
from pixabay_search.domain.entities.query import Token


def tokens(*words: str) -> list[Token]:
    return [Token(word) for word in words]


@pytest.fixture
def classifier():
    return CategoryClassifier()


class TestClassify:
    """Tests for priority-weighted category classification."""

    def test_specific_beats_generic(self, classifier):
        match = classifier.classify(tokens("medical", "news"))
        assert match.category == PixabayCategory.HEALTH
        assert match.priority == 5

    def test_order_does_not_matter_for_priority(self, classifier):
        match = classifier.classify(tokens("news", "medical"))
        assert match.category == PixabayCategory.HEALTH

    def test_first_seen_wins_ties(self, classifier):
        match = classifier.classify(tokens("dog", "dental"))
        assert match.category == PixabayCategory.ANIMALS

    def test_geographic_over_generic(self, classifier):
        match = classifier.classify(tokens("china", "news"))
        assert match.category == PixabayCategory.PLACES
        assert match.priority == 3

    def test_case_insensitive(self, classifier):
        assert classifier.classify(tokens("DENTAL")).category == PixabayCategory.HEALTH

    def test_no_match(self, classifier):
        match = classifier.classify(tokens("xyzzy", "plugh"))
        assert not match
        assert match.category is None
        assert match.priority == 0

    def test_empty_tokens(self, classifier):
        assert not classifier.classify([])


class TestContentHint:
    """Tests for the content-category hint."""

    def test_hint_used_when_tokens_are_generic(self, classifier):
        match = classifier.classify(tokens("news", "blog"), hint="pet")
        assert match.category == PixabayCategory.ANIMALS

    def test_hint_wins_ties(self, classifier):
        match = classifier.classify(tokens("dental"), hint="pet")
        assert match.category == PixabayCategory.ANIMALS

    def test_stronger_token_beats_weaker_hint(self, classifier):
        match = classifier.classify(tokens("dental"), hint="business")
        assert match.category == PixabayCategory.HEALTH

    def test_unknown_hint_ignored(self, classifier):
        match = classifier.classify(tokens("dental"), hint="widgets")
        assert match.category == PixabayCategory.HEALTH


class TestLookupAndMatchedCategories:
    """Tests for single-word lookup and fan-out category matching."""

    def test_lookup(self, classifier):
        match = classifier.lookup("Hospital")
        assert match.category == PixabayCategory.HEALTH
        assert match.priority == 4

    def test_matched_categories_first_seen_order(self, classifier):
        result = classifier.matched_categories(tokens("pet", "food", "dog", "xyz"))
        assert result == [PixabayCategory.ANIMALS, PixabayCategory.FOOD]

    def test_custom_table(self):
        classifier = CategoryClassifier(table={"widget": (PixabayCategory.INDUSTRY, 5)})
        assert classifier.classify(tokens("widget")).category == PixabayCategory.INDUSTRY
        assert not classifier.classify(tokens("dental"))


class TestVocabulary:
    """Tests for the keyword tables themselves."""

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_KEYWORDS["new"] = (PixabayCategory.MUSIC, 5)  # type: ignore[index]

    def test_priorities_in_range(self):
        assert all(1 <= priority <= 5 for _, priority in CATEGORY_KEYWORDS.values())
