"""Pretty-printing of generated style rules."""
from __future__ import annotations

from collections.abc import Sequence

from darkgen.config import FormatOptions
from darkgen.stylesheet.model import StyleRule


def wrap_selectors(selectors: Sequence[str], max_length: int) -> list[str]:
    """Pack selectors onto lines of at most *max_length* characters.

    Every line but the last ends with a comma. A selector that is longer than
    *max_length* on its own gets a line to itself.
    """
    lines: list[str] = []
    current = ""
    for i, selector in enumerate(selectors):
        piece = selector if i == len(selectors) - 1 else selector + ","
        if not current:
            current = piece
        elif len(current) + 1 + len(piece) <= max_length:
            current = f"{current} {piece}"
        else:
            lines.append(current)
            current = piece
    if current:
        lines.append(current)
    return lines


def format_rule(rule: StyleRule, options: FormatOptions | None = None) -> str:
    """Render *rule* as CSS text terminated by a newline."""
    opts = options or FormatOptions()
    if not rule.selectors:
        raise ValueError("Cannot format a rule without selectors")
    lines = wrap_selectors(rule.selectors, opts.max_selector_length)
    decls = [f"{decl};" for decl in rule.declarations]

    if opts.style == "compact":
        lines[-1] = f"{lines[-1]} {{ {' '.join(decls)} }}"
        return "\n".join(lines) + "\n"
    if opts.style != "expanded":
        raise ValueError(f"Unknown format style: {opts.style!r}")

    indent = " " * opts.indent_size
    lines[-1] = f"{lines[-1]} {{"
    lines.extend(indent + decl for decl in decls)
    lines.append("}")
    return "\n".join(lines) + "\n"
