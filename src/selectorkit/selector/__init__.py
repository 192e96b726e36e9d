"""CSS selector builder -- public re-exports."""

from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.selector.model import CATEGORY_ORDER, Category, SelectorPart

__all__ = [
    "css_selector_builder",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "Category",
    "CATEGORY_ORDER",
    "SelectorPart",
]
