"""CSS stylesheet parsing on top of tinycss2.

Only top-level qualified rules are kept. At-rules (``@media``, ``@supports``,
``@font-face`` ...) are not descended into, so nothing generated from them can
leak out of its original condition.
"""

from __future__ import annotations

import re

import tinycss2

from darkgen.stylesheet.model import Declaration, StyleRule, Stylesheet

__all__ = ["parse_stylesheet"]

_WS_RE = re.compile(r"\s+")


def _serialize(tokens: list) -> str:
    """Serialize component values without comments, collapsing whitespace."""
    text = tinycss2.serialize(t for t in tokens if t.type != "comment")
    return _WS_RE.sub(" ", text).strip()


def _split_selectors(prelude: list) -> tuple[str, ...]:
    """Split a rule prelude on top-level commas."""
    selectors: list[str] = []
    current: list = []
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            selectors.append(_serialize(current))
            current = []
        else:
            current.append(token)
    selectors.append(_serialize(current))
    return tuple(s for s in selectors if s)


def _parse_declarations(content: list) -> tuple[Declaration, ...]:
    """Parse the body of a rule block into declarations."""
    nodes = tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    )
    return tuple(
        Declaration(
            property=node.lower_name,
            value=_serialize(node.value),
            important=node.important,
        )
        for node in nodes
        if node.type == "declaration"
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source into a Stylesheet.

    Returns a Stylesheet containing the top-level style rules in source order.
    Malformed fragments are skipped.
    """
    rules: list[StyleRule] = []
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        if node.type != "qualified-rule":
            continue
        rules.append(
            StyleRule(
                selectors=_split_selectors(node.prelude),
                declarations=_parse_declarations(node.content),
            )
        )
    return Stylesheet(rules=rules)
