from darkgen.stylesheet.parser import parse_stylesheet
from darkgen.stylesheet.model import Declaration, Stylesheet, StyleRule

__all__ = ["parse_stylesheet", "Declaration", "Stylesheet", "StyleRule"]
