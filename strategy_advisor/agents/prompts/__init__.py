"""Advisor prompt templates.

Templates are plain .txt files filled with str.format; literal JSON braces
in them are doubled.
"""

from functools import lru_cache
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent


@lru_cache(maxsize=None)
def load_prompt(name: str) -> str:
    """Read a template once; unknown names raise ValueError."""
    template = TEMPLATE_DIR / f"{name}.txt"
    if not template.is_file():
        raise ValueError(f"Prompt not found: {name}")
    return template.read_text(encoding="utf-8")


def render_prompt(name: str, **values: str) -> str:
    """Fill a template and trim the surrounding whitespace."""
    return load_prompt(name).format(**values).strip()
