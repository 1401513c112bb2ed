"""Build the dark-theme override block from a live site's CSS."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from darkgen._http import HttpClient
from darkgen.config import FormatOptions, GeneratorConfig
from darkgen.fetcher import pull_css
from darkgen.formatter import format_rule
from darkgen.mappings import COLOR_MAPPINGS, ColorMapping
from darkgen.matcher import MatchGroups, match_rules
from darkgen.stylesheet import Declaration, StyleRule, parse_stylesheet

logger = logging.getLogger(__name__)

BEGIN_BANNER = "/* begin auto-generated rules - use darkgen to generate them */"
END_BANNER = "/* end auto-generated rules */"


def merge_selectors(selectors: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated selectors, keeping the first occurrence of each."""
    return tuple(dict.fromkeys(selectors))


def build_rules(
    groups: MatchGroups,
    mappings: Sequence[ColorMapping] = COLOR_MAPPINGS,
    options: FormatOptions | None = None,
) -> str:
    """Format one override rule per mapping, in table order.

    Mappings whose group is empty are skipped; a rule without selectors is
    not valid CSS.
    """
    out: list[str] = []
    for mapping in mappings:
        selectors = merge_selectors(groups.get(mapping.source, ()))
        if not selectors:
            logger.warning("No selectors matched %r; skipping", mapping.source)
            continue
        rule = StyleRule(
            selectors=selectors,
            declarations=(Declaration.from_text(mapping.replacement, important=True),),
        )
        out.append(f'/* auto-generated rule for "{mapping.source}" */\n')
        out.append(format_rule(rule, options))
    return "".join(out)


def render_block(body: str, indent: str = "  ") -> str:
    """Wrap *body* in the banner comments and indent every line."""
    output = f"{BEGIN_BANNER}\n{body}{END_BANNER}"
    return "\n".join(indent + line for line in output.split("\n"))


def generate_from_css(
    css: str,
    mappings: Sequence[ColorMapping] = COLOR_MAPPINGS,
    options: FormatOptions | None = None,
    indent: str = "  ",
) -> str:
    """Produce the complete override block for already-fetched CSS."""
    stylesheet = parse_stylesheet(css)
    logger.info("Parsed %d style rules", len(stylesheet.rules))
    groups = match_rules(stylesheet, mappings)
    return render_block(build_rules(groups, mappings, options), indent)


def generate(config: GeneratorConfig, client: HttpClient | None = None) -> str:
    """Fetch the configured site's CSS and produce the override block."""
    owns_client = client is None
    if client is None:
        client = HttpClient(timeout=config.timeout, user_agent=config.user_agent)
    try:
        css = pull_css(client, config.root_url)
    finally:
        if owns_client:
            client.close()
    return generate_from_css(css, COLOR_MAPPINGS, config.format, config.block_indent)
