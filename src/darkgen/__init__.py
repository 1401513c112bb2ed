"""darkgen: dark-theme override generator for a live site's stylesheets."""
from __future__ import annotations

__version__ = "0.1.0"

from darkgen.config import FormatOptions, GeneratorConfig
from darkgen.errors import DarkgenError, FileError, NetworkError
from darkgen.generator import generate
from darkgen.mappings import COLOR_MAPPINGS, ColorMapping

__all__ = [
    "__version__",
    "COLOR_MAPPINGS",
    "ColorMapping",
    "DarkgenError",
    "FileError",
    "FormatOptions",
    "GeneratorConfig",
    "NetworkError",
    "generate",
]
