"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

These nodes represent the parsed structure of a JSON Schema before
any reference resolution or naming takes place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in schema (for error messages)
    source_path: str = ""

    title: str | None = None
    description: str | None = None


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a primitive type (string, integer, number, boolean, null, any)."""

    type_name: str = ""
    format: str | None = None  # String format, e.g. "date-time"


@dataclass
class ConstNode(SchemaNode):
    """Represents a const value."""

    value: Any = None


@dataclass
class EnumNode(SchemaNode):
    """Represents an enum."""

    values: list[Any] = field(default_factory=list)


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref (unresolved reference)."""

    ref_path: str = ""  # e.g., "#/definitions/MyClass" or external path


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: SchemaNode | None = None


@dataclass
class PropertyDef(SchemaNode):
    """Represents a property in an object."""

    name: str = ""
    type_node: SchemaNode | None = None
    is_required: bool = False


@dataclass
class ObjectNode(SchemaNode):
    """Represents an object type."""

    properties: list[PropertyDef] = field(default_factory=list)
    required: list[str] = field(default_factory=list)

    # Schema for values of keys not listed in properties (None if not allowed)
    additional_properties: SchemaNode | None = None


@dataclass
class UnionNode(SchemaNode):
    """Represents a union: oneOf, anyOf or a list of types."""

    variants: list[SchemaNode] = field(default_factory=list)
    union_type: str = "oneOf"  # "oneOf", "anyOf" or "typeArray"


@dataclass
class AllOfNode(SchemaNode):
    """Represents an intersection via allOf."""

    parts: list[SchemaNode] = field(default_factory=list)


@dataclass
class DefinitionNode(SchemaNode):
    """Represents a definition ($defs or definitions entry)."""

    name: str = ""
    body: SchemaNode | None = None


@dataclass
class SchemaAST:
    """Root of the parsed schema AST."""

    root_name: str = ""
    root_node: SchemaNode | None = None
    definitions: list[DefinitionNode] = field(default_factory=list)
