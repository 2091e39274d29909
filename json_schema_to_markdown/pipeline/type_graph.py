"""
Type graph node definitions.

These nodes represent a resolved schema: every reference points at its
target, every named type has a unique display name in the graph's name
table, and nothing is left for the renderer to infer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrimitiveKind(Enum):
    """Kind of primitive type."""

    NULL = "null"
    BOOL = "bool"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    ANY = "any"


@dataclass(frozen=True)
class PrimitiveType:
    """A primitive type (null, bool, integer, double, string, any)."""

    kind: PrimitiveKind = PrimitiveKind.ANY


@dataclass(frozen=True)
class TransformedStringType:
    """A string with a recognised format (e.g. "date-time", "uuid")."""

    format: str = ""


@dataclass(frozen=True)
class ArrayType:
    """An array with a single item type."""

    items: TypeRef


@dataclass(frozen=True)
class MapType:
    """An object with arbitrary keys and uniform values."""

    values: TypeRef


@dataclass(frozen=True)
class UnionType:
    """A union of two or more types (oneOf, anyOf, nullable types)."""

    members: tuple[TypeRef, ...] = ()


@dataclass
class ClassProperty:
    """A property of a class."""

    name: str = ""  # Display name
    json_name: str = ""  # Key as it appears in the schema
    type: TypeRef | None = None
    is_optional: bool = False
    description: list[str] | None = None


@dataclass
class EnumCase:
    """A case of an enum."""

    name: str = ""  # Display name
    json_name: str = ""  # Value as it appears on the wire


# Named types compare by identity so recursive graphs can be hashed and
# used as keys of the name table.
@dataclass(eq=False)
class ClassType:
    """A named object type with properties."""

    type_id: str = ""  # Schema path the class was resolved from
    properties: list[ClassProperty] = field(default_factory=list, repr=False)
    description: list[str] | None = None


@dataclass(eq=False)
class EnumType:
    """A named enumeration of string values."""

    type_id: str = ""
    cases: list[EnumCase] = field(default_factory=list)
    description: list[str] | None = None


@dataclass(eq=False)
class ObjectType:
    """A named object defined outside this schema (external $ref)."""

    type_id: str = ""
    description: list[str] | None = None


TypeRef = PrimitiveType | TransformedStringType | ArrayType | MapType | UnionType | ClassType | EnumType | ObjectType

NamedType = ClassType | EnumType | ObjectType


@dataclass
class TypeGraph:
    """The complete resolved type graph handed to the renderer."""

    # Entries in document order; unions may appear and are never rendered
    named_types: list[TypeRef] = field(default_factory=list)

    # Named type -> unique display name
    names: dict[NamedType, str] = field(default_factory=dict)

    # Top-level name -> type
    top_level: dict[str, TypeRef] = field(default_factory=dict)

    def name_for(self, t: NamedType) -> str:
        """
        Get the display name of a named type.

        Raises:
            KeyError: If the resolver did not assign a name to the type
        """
        return self.names[t]
