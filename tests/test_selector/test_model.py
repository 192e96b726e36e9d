"""Tests for selector categories and parts."""

import pytest

from selectorkit.selector import CATEGORY_ORDER, Category, SelectorPart


class TestCategory:
    def test_fixed_order(self) -> None:
        assert CATEGORY_ORDER == (
            Category.ELEMENT,
            Category.ID,
            Category.CLASS,
            Category.ATTRIBUTE,
            Category.PSEUDO_CLASS,
            Category.PSEUDO_ELEMENT,
        )

    def test_rank_follows_order(self) -> None:
        assert [c.rank for c in CATEGORY_ORDER] == [0, 1, 2, 3, 4, 5]

    @pytest.mark.parametrize(
        "category", [Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT]
    )
    def test_singletons(self, category: Category) -> None:
        assert category.is_singleton

    @pytest.mark.parametrize(
        "category", [Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS]
    )
    def test_repeatable(self, category: Category) -> None:
        assert not category.is_singleton


class TestSelectorPart:
    @pytest.mark.parametrize(
        "category, value, fragment",
        [
            (Category.ELEMENT, "div", "div"),
            (Category.ID, "main", "#main"),
            (Category.CLASS, "container", ".container"),
            (Category.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
            (Category.PSEUDO_CLASS, "focus", ":focus"),
            (Category.PSEUDO_ELEMENT, "before", "::before"),
        ],
    )
    def test_create_renders_marker(
        self, category: Category, value: str, fragment: str
    ) -> None:
        part = SelectorPart.create(category, value)
        assert part == SelectorPart(category=category, fragment=fragment)

    def test_is_frozen(self) -> None:
        part = SelectorPart.create(Category.ID, "x")
        with pytest.raises(AttributeError):
            part.fragment = "#y"  # type: ignore[misc]
