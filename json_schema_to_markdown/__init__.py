"""JSON Schema to Markdown

Generates cross-referenced Markdown reference documentation from a
JSON Schema: one anchored section per class and enum, with property
types linking to the sections of the types they use.
"""

__version__ = "1.0.0"

from .pipeline import (  # noqa: E402
    MarkdownConfig,
    MarkdownGenerator,
    MarkdownRenderer,
    SchemaResolutionError,
    render_document,
)

__all__ = [
    "MarkdownGenerator",
    "MarkdownConfig",
    "MarkdownRenderer",
    "SchemaResolutionError",
    "render_document",
]
