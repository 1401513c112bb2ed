from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from darkgen import __version__

# src/darkgen/config.py -> repository root
_REPO_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_ROOT_URL = "https://github.com"
DEFAULT_TARGET = _REPO_ROOT / "github-dark.css"


@dataclass(frozen=True)
class FormatOptions:
    max_selector_length: int = 78  # 80 minus the block indent
    indent_size: int = 2
    style: str = "expanded"  # "expanded" or "compact"


@dataclass(frozen=True)
class GeneratorConfig:
    root_url: str = DEFAULT_ROOT_URL
    target_path: Path = DEFAULT_TARGET
    timeout: float | None = None  # seconds; None waits indefinitely
    user_agent: str = f"darkgen/{__version__}"
    format: FormatOptions = field(default_factory=FormatOptions)
    block_indent: str = "  "
