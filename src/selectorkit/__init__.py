"""selectorkit: CSS selector builder plus small object and JSON helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)
from selectorkit.selector import SelectorBuilder, css_selector_builder
from selectorkit.serialization import from_json_text, to_json_text
from selectorkit.shapes import Rectangle, rectangle

__all__ = [
    # selector
    "css_selector_builder",
    "SelectorBuilder",
    # errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    # helpers
    "Rectangle",
    "rectangle",
    "to_json_text",
    "from_json_text",
    # config
    "SelectorKitConfig",
]
