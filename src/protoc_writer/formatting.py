"""Indentation helpers and the Jinja2 environment used to lay out proto blocks."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

INDENT = "  "


def indent_level(level: int) -> str:
    """Two spaces per nesting level; level 0 is not indented."""
    return INDENT * level


def with_comment(line: str, comment: str) -> str:
    """Append a trailing `// comment` to a declaration line when one is set."""
    if comment:
        return f"{line}   // {comment}"
    return line


@lru_cache(maxsize=None)
def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
        undefined=StrictUndefined,
        autoescape=False,
    )


def render_template(template_name: str, **context) -> str:
    """Render one of the bundled proto templates."""
    template = _get_template_env().get_template(template_name)
    return template.render(**context)
