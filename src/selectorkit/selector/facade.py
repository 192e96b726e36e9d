"""Facade: stateless entry points that start a new selector builder."""

from __future__ import annotations

from selectorkit.selector.builder import SelectorBuilder


class CssSelectorBuilder:
    """Each entry point creates a fresh SelectorBuilder and forwards to it."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
