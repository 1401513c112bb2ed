"""Match stylesheet declarations against the color mapping table."""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from darkgen.mappings import COLOR_MAPPINGS, ColorMapping
from darkgen.stylesheet.model import Stylesheet

logger = logging.getLogger(__name__)

MatchGroups = Mapping[str, tuple[str, ...]]

# Vendor-prefixed and selection/placeholder pseudo selectors invalidate the
# whole selector list in some browsers, so they cannot share a merged rule.
UNMERGEABLE_RE = re.compile(r"(-moz-|-ms-|-o-|-webkit-|:selection|:placeholder)")

_IMPORTANT_RE = re.compile(r"!important", re.IGNORECASE)


def normalize_value(value: str) -> str:
    """Strip ``!important``, surrounding whitespace, and case from a value."""
    return _IMPORTANT_RE.sub("", value).strip().lower()


def is_unmergeable(selector: str) -> bool:
    return UNMERGEABLE_RE.search(selector) is not None


def normalize_selector(selector: str) -> str:
    """Rewrite ``::`` pseudo-element syntax to the single-colon form.

    Every occurrence is rewritten, not only the first.
    """
    return selector.replace("::", ":")


def match_rules(
    stylesheet: Stylesheet,
    mappings: Sequence[ColorMapping] = COLOR_MAPPINGS,
) -> MatchGroups:
    """Collect, per mapping, the selectors of rules declaring its source value.

    The result is keyed by ``mapping.source`` in table order and contains every
    mapping, with an empty tuple where nothing matched.
    """
    keys = {(m.prop, m.value.lower()): m.source for m in mappings}
    groups: dict[str, list[str]] = {m.source: [] for m in mappings}

    for rule in stylesheet.rules:
        if not rule.selectors:
            continue
        for decl in rule.declarations:
            source = keys.get((decl.property, normalize_value(decl.value)))
            if source is None:
                continue
            for selector in rule.selectors:
                if is_unmergeable(selector):
                    logger.debug("Dropping unmergeable selector %r", selector)
                    continue
                groups[source].append(normalize_selector(selector))

    return MappingProxyType({key: tuple(sels) for key, sels in groups.items()})
