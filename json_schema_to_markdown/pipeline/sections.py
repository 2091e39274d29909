"""
Section emitter.

Renders one named type as a self-contained Markdown section: an HTML
anchor, a level-2 header, the optional description and the list of
properties (classes) or variants (enums).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .config import MarkdownConfig
from .formatter import NameLookup, code_span, format_type
from .type_graph import ClassProperty, ClassType, EnumType

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "markdown"


class SectionEmitter:
    """Renders class and enum sections from Jinja2 templates."""

    def __init__(self, config: MarkdownConfig):
        """
        Initialize the emitter.

        Args:
            config: Rendering configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["code_span"] = code_span
        self.class_template = self.jinja_env.get_template("class.md.jinja2")
        self.enum_template = self.jinja_env.get_template("enum.md.jinja2")
        self.legacy_enum_template = self.jinja_env.get_template("enum_legacy.md.jinja2")

    def emit_class(self, c: ClassType, class_name: str, name_for: NameLookup) -> list[str]:
        """
        Render a class section.

        Args:
            c: The class to render
            class_name: Display name of the class
            name_for: Display name lookup for types referenced by properties

        Returns:
            The section as a list of lines
        """
        context = self._prepare_class_context(c, class_name, name_for)
        return self._render_lines(self.class_template, context)

    def emit_enum(self, e: EnumType, enum_name: str) -> list[str]:
        """
        Render an enum section.

        Variants are listed by their wire value, which is what appears in
        documents conforming to the schema.
        """
        context = {
            "name": enum_name,
            "description": e.description,
            "cases": e.cases,
            "indentation": self.config.indentation,
        }
        if self.config.legacy_enum_blocks:
            logger.warning("Rendering enum %s as a fenced declaration block (legacy format)", enum_name)
            return self._render_lines(self.legacy_enum_template, context)
        return self._render_lines(self.enum_template, context)

    def _prepare_class_context(self, c: ClassType, class_name: str, name_for: NameLookup) -> dict[str, Any]:
        return {
            "name": class_name,
            "description": c.description,
            "properties": [self._prepare_property_context(p, name_for) for p in c.properties],
        }

    def _prepare_property_context(self, prop: ClassProperty, name_for: NameLookup) -> dict[str, Any]:
        return {
            "name": prop.name,
            "is_optional": prop.is_optional,
            "type": format_type(prop.type, name_for).text,
            "description": self._indent_lines(prop.description) if prop.description is not None else None,
        }

    def _indent_lines(self, lines: list[str]) -> list[str]:
        """Indent description lines one level, leaving blank lines empty."""
        prefix = self.config.indentation
        return [prefix + line if line.strip() else line for line in lines]

    @staticmethod
    def _render_lines(template: jinja2.Template, context: dict[str, Any]) -> list[str]:
        lines = template.render(context).split("\n")
        # The last rendered line is newline-terminated
        if lines and lines[-1] == "":
            lines.pop()
        return lines
