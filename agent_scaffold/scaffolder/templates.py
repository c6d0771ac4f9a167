"""Jinja2 template rendering for agent project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``agent_scaffold/scaffolder/templates/`` directory and renders them with
answer-derived context data.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for agent scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Autoescaping is off: the templates produce
    TypeScript, JSON, dotenv and Markdown, never HTML.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["package_name"] = package_name
        self.env.filters["js_quote"] = js_quote
        self.env.filters["camel_case"] = _camel_case_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"register.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)



# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def package_name(value: str) -> str:
    """Derive an npm package name: lower-case, whitespace runs become ``-``.

    E.g. ``'Demo  Agent'`` -> ``'demo-agent'``.
    """
    return re.sub(r"\s+", "-", value.lower())


def js_quote(value: str) -> str:
    """Escape double quotes for a double-quoted JavaScript string literal.

    Only ``"`` is escaped; backslashes, backticks and newlines pass through.
    """
    return value.replace('"', '\\"')


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    parts = [p for p in re.split(r"[-_\s]+", value) if p]
    if not parts:
        return ""
    return parts[0].lower() + "".join(word.capitalize() for word in parts[1:])
