"""Stylesheet model: Declaration, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair, optionally ``!important``."""

    property: str
    value: str
    important: bool = False

    @classmethod
    def from_text(cls, text: str, *, important: bool = False) -> Declaration:
        """Build a declaration from a ``"property: value"`` string."""
        prop, sep, value = text.partition(":")
        if not sep:
            raise ValueError(f"Invalid declaration: {text!r}")
        return cls(property=prop.strip(), value=value.strip(), important=important)

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass(frozen=True)
class StyleRule:
    """A selector list paired with its declarations, both in source order."""

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...]


@dataclass(frozen=True)
class Stylesheet:
    """The top-level style rules of a CSS document."""

    rules: list[StyleRule]
