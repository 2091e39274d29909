"""
Document renderer.

Walks the named types of a type graph in order and assembles their
sections into one Markdown document.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .. import __version__
from .config import MarkdownConfig
from .sections import SectionEmitter
from .type_graph import ClassType, EnumType, TypeGraph, UnionType

logger = logging.getLogger(__name__)


class LineBuffer:
    """Append-only list of output lines with collapsible blank-line separators."""

    def __init__(self):
        self.lines: list[str] = []
        self._need_blank_line = False

    def ensure_blank_line(self) -> None:
        """Request a blank line before whatever is emitted next."""
        self._need_blank_line = True

    def emit(self, lines: list[str]) -> None:
        if not lines:
            return
        if self._need_blank_line and (not self.lines or self.lines[-1] != ""):
            self.lines.append("")
        self._need_blank_line = False
        self.lines.extend(lines)


class MarkdownRenderer:
    """Renders a type graph as a cross-referenced Markdown document."""

    def __init__(self, config: MarkdownConfig | None = None):
        """
        Initialize the renderer.

        Args:
            config: Rendering configuration. ``just_types`` is turned on
                unless the configuration sets it explicitly.
        """
        self.options = self._resolve_options(config or MarkdownConfig())
        self.emitter = SectionEmitter(self.options)

    @staticmethod
    def _resolve_options(config: MarkdownConfig) -> MarkdownConfig:
        options = replace(config)
        if options.just_types is None:
            options.just_types = True
        elif not options.just_types:
            logger.warning("just_types is off, but Markdown output only ever contains type declarations")
        return options

    def render(self, graph: TypeGraph) -> list[str]:
        """
        Render the document.

        A blank line goes before every section, including the first. Union
        entries never get a section, and kinds this renderer does not know
        are skipped.

        Args:
            graph: The resolved type graph

        Returns:
            The document as a list of lines
        """
        buffer = LineBuffer()

        if self.options.add_generation_comment:
            buffer.emit([f"<!-- Generated by json_schema_to_markdown v{__version__} -->"])

        for t in graph.named_types:
            buffer.ensure_blank_line()
            match t:
                case ClassType():
                    buffer.emit(self.emitter.emit_class(t, graph.name_for(t), graph.name_for))
                case EnumType():
                    buffer.emit(self.emitter.emit_enum(t, graph.name_for(t)))
                case UnionType():
                    pass
                case _:
                    logger.debug("No section for %s entry, skipping", type(t).__name__)

        return buffer.lines


def render_document(graph: TypeGraph, config: MarkdownConfig | None = None) -> list[str]:
    """Render a type graph as a list of Markdown lines."""
    return MarkdownRenderer(config).render(graph)
