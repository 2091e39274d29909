"""
Pipeline generator.

Runs the phases in order: parse the schema into an AST, resolve it into a
type graph, then render the graph as Markdown.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import MarkdownConfig
from .document import MarkdownRenderer
from .resolver import SchemaResolver
from .schema_ast import SchemaParser
from .type_graph import TypeGraph

logger = logging.getLogger(__name__)


class MarkdownGenerator:
    """Generates Markdown reference documentation from a JSON Schema."""

    def __init__(self, name: str, schema: dict[str, Any], config: MarkdownConfig | None = None):
        """
        Initialize the generator.

        Args:
            name: Name of the top-level type
            schema: The JSON Schema dictionary
            config: Rendering configuration
        """
        self.name = name
        self.schema = schema
        self.config = config or MarkdownConfig()

    def resolve(self) -> TypeGraph:
        """Parse and resolve the schema into a type graph."""
        ast = SchemaParser().parse(self.schema, self.name)
        logger.debug("Parsed %d definitions from schema %s", len(ast.definitions), self.name)
        return SchemaResolver().resolve(ast)

    def generate_lines(self) -> list[str]:
        """Generate the document as a list of lines."""
        graph = self.resolve()
        return MarkdownRenderer(self.config).render(graph)

    def generate(self) -> str:
        """Generate the document as newline-terminated text."""
        return "".join(line + "\n" for line in self.generate_lines())
