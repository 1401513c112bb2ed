"""Fixed light-to-dark declaration table.

Each entry pairs a declaration found in the site's own stylesheets with the
declaration that replaces it in the dark theme. Table order is output order.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorMapping:
    """A source declaration and its dark-theme replacement."""

    source: str  # "property: value"
    replacement: str  # "property: value"

    @property
    def prop(self) -> str:
        return self.source.partition(": ")[0]

    @property
    def value(self) -> str:
        return self.source.partition(": ")[2]


COLOR_MAPPINGS: tuple[ColorMapping, ...] = (
    ColorMapping("background-color: #2cbe4e", "background: #163"),
    ColorMapping("background-color: #d1d5da", "background: #444"),
    ColorMapping("background-color: #6f42c1", "background: #6e5494"),
    ColorMapping("background-color: #cb2431", "background: #911"),
    ColorMapping("background-color: #fff5b1", "background-color: #261d08"),
    ColorMapping("border-bottom: 1px solid #e1e4e8", "border-bottom: 1px solid #343434"),
    ColorMapping("border-left: 1px solid #e1e4e8", "border-left: 1px solid #343434"),
    ColorMapping("border-right: 1px solid #e1e4e8", "border-right: 1px solid #343434"),
    ColorMapping("border-top: 1px solid #e1e4e8", "border-top: 1px solid #343434"),
    ColorMapping("border-bottom: 0", "border-bottom: 0"),
    ColorMapping("border-left: 0", "border-left: 0"),
    ColorMapping("border-right: 0", "border-right: 0"),
    ColorMapping("border-top: 0", "border-top: 0"),
    ColorMapping("border: 1px solid #e1e4e8", "border-color: #343434"),
    ColorMapping("border: 1px solid rgba(27,31,35,0.15)", "border-color: rgba(225,225,225,0.2)"),
    ColorMapping("color: #444d56", "color: #ccc"),
    ColorMapping("color: #586069", "color: #bbb"),
    ColorMapping("color: #6a737d", "color: #aaa"),
    ColorMapping("color: rgba(27,31,35,0.85)", "color: rgba(230,230,230,.85)"),
)
