"""
Pipeline - JSON Schema to Markdown reference documentation.

1. Phase 1 (Parser): Parse JSON Schema into Schema AST
2. Phase 2 (Resolver): Resolve references and names into a type graph
3. Phase 3 (Renderer): Render each named type as an anchored Markdown section
"""

from __future__ import annotations

from .config import MarkdownConfig
from .document import MarkdownRenderer, render_document
from .errors import SchemaResolutionError
from .formatter import Fragment, format_declaration, format_type
from .generator import MarkdownGenerator
from .sections import SectionEmitter

__all__ = [
    "MarkdownGenerator",
    "MarkdownConfig",
    "MarkdownRenderer",
    "SectionEmitter",
    "SchemaResolutionError",
    "Fragment",
    "format_type",
    "format_declaration",
    "render_document",
]
