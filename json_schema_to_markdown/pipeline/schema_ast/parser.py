"""
JSON Schema parser that builds an AST.

Phase 1 of the pipeline: Parse JSON Schema into an AST without
resolving references or assigning names.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaResolutionError
from .nodes import (
    AllOfNode,
    ArrayNode,
    ConstNode,
    DefinitionNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaAST,
    SchemaNode,
    UnionNode,
)


class SchemaParser:
    """Parses JSON Schema into an AST."""

    PRIMITIVE_TYPES = {"string", "integer", "number", "boolean", "null"}

    def parse(self, schema: dict[str, Any], root_name: str) -> SchemaAST:
        """
        Parse a JSON Schema into an AST.

        Args:
            schema: The JSON Schema dictionary
            root_name: Name for the top-level type

        Returns:
            SchemaAST with parsed definitions and root node

        Raises:
            SchemaResolutionError: If the document is not a JSON Schema object
        """
        if not isinstance(schema, dict):
            raise SchemaResolutionError(f"Expected a JSON object at the schema root, got {type(schema).__name__}")

        ast = SchemaAST(root_name=root_name)

        for key in ("definitions", "$defs"):
            prefix = f"#/{key}"
            for name, def_schema in (schema.get(key) or {}).items():
                path = f"{prefix}/{name}"
                ast.definitions.append(
                    DefinitionNode(
                        name=name,
                        body=self._parse_schema_node(def_schema, path),
                        source_path=path,
                    )
                )

        ast.root_node = self._parse_schema_node(schema, "#")
        return ast

    def _parse_schema_node(self, schema: Any, path: str) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema (a dictionary, or a boolean schema)
            path: Current path in schema (for error messages)

        Returns:
            Appropriate SchemaNode subclass
        """
        if isinstance(schema, bool):
            # true accepts anything; false accepts nothing, which has no
            # better rendering than "any"
            return PrimitiveNode(type_name="any", source_path=path)

        if not isinstance(schema, dict):
            raise SchemaResolutionError(f"Invalid schema at {path}: expected an object, got {type(schema).__name__}")

        node = self._parse_schema_body(schema, path)
        node.title = schema.get("title")
        node.description = schema.get("description")
        return node

    def _parse_schema_body(self, schema: dict[str, Any], path: str) -> SchemaNode:
        if "$ref" in schema:
            return RefNode(ref_path=schema["$ref"], source_path=path)

        if "const" in schema:
            return ConstNode(value=schema["const"], source_path=path)

        if "oneOf" in schema or "anyOf" in schema:
            return self._parse_union_node(schema, path)

        if "allOf" in schema:
            return self._parse_allof_node(schema, path)

        # enum wins over type: {"type": "string", "enum": [...]} is an enum
        if "enum" in schema:
            return EnumNode(values=list(schema["enum"]), source_path=path)

        if "type" in schema:
            return self._parse_type_node(schema, path)

        if "properties" in schema or "additionalProperties" in schema:
            return self._parse_object_node(schema, path)

        if "items" in schema:
            return self._parse_array_node(schema, path)

        return PrimitiveNode(type_name="any", source_path=path)

    def _parse_union_node(self, schema: dict[str, Any], path: str) -> UnionNode:
        """Parse a oneOf or anyOf union node."""
        union_type = "oneOf" if "oneOf" in schema else "anyOf"
        variants = [self._parse_schema_node(variant, f"{path}/{union_type}/{i}") for i, variant in enumerate(schema[union_type])]
        return UnionNode(variants=variants, union_type=union_type, source_path=path)

    def _parse_allof_node(self, schema: dict[str, Any], path: str) -> AllOfNode:
        """Parse an allOf node, keeping sibling properties as an extra part."""
        parts = [self._parse_schema_node(part, f"{path}/allOf/{i}") for i, part in enumerate(schema["allOf"])]
        if "properties" in schema:
            parts.append(self._parse_object_node(schema, path))
        return AllOfNode(parts=parts, source_path=path)

    def _parse_type_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        """Parse a type-based node."""
        type_value = schema["type"]

        if isinstance(type_value, list):
            # Single-element type array is not a union
            if len(type_value) != 1:
                return self._parse_type_union(schema, type_value, path)
            type_value = type_value[0]

        if type_value == "array":
            return self._parse_array_node(schema, path)

        if type_value == "object":
            return self._parse_object_node(schema, path)

        if type_value in self.PRIMITIVE_TYPES:
            return PrimitiveNode(type_name=type_value, format=schema.get("format"), source_path=path)

        raise SchemaResolutionError(f"Unsupported type {type_value!r} at {path}")

    def _parse_type_union(self, schema: dict[str, Any], types: list[str], path: str) -> UnionNode:
        """Parse a union of types (e.g., ["string", "null"])."""
        variants = []
        for t in types:
            # Keep the keywords that apply to this variant (items, properties, ...)
            variant_schema = {k: v for k, v in schema.items() if k not in ("title", "description")}
            variant_schema["type"] = t
            variants.append(self._parse_schema_node(variant_schema, f"{path}/type/{t}"))

        return UnionNode(variants=variants, union_type="typeArray", source_path=path)

    def _parse_array_node(self, schema: dict[str, Any], path: str) -> ArrayNode:
        """Parse an array type node."""
        items_schema = schema.get("items")
        items = None

        if isinstance(items_schema, list):
            # Tuple validation: document the array by its first item type
            if items_schema:
                items = self._parse_schema_node(items_schema[0], f"{path}/items/0")
        elif items_schema is not None:
            items = self._parse_schema_node(items_schema, f"{path}/items")

        return ArrayNode(items=items, source_path=path)

    def _parse_object_node(self, schema: dict[str, Any], path: str) -> ObjectNode:
        """Parse an object type node."""
        properties = []
        required_fields = schema.get("required", [])

        for prop_name, prop_schema in schema.get("properties", {}).items():
            prop_path = f"{path}/properties/{prop_name}"
            properties.append(
                PropertyDef(
                    name=prop_name,
                    type_node=self._parse_schema_node(prop_schema, prop_path),
                    is_required=prop_name in required_fields,
                    source_path=prop_path,
                )
            )

        additional = schema.get("additionalProperties")
        additional_node = None
        if isinstance(additional, dict):
            additional_node = self._parse_schema_node(additional, f"{path}/additionalProperties")
        elif additional is True:
            additional_node = PrimitiveNode(type_name="any", source_path=f"{path}/additionalProperties")

        return ObjectNode(
            properties=properties,
            required=list(required_fields),
            additional_properties=additional_node,
            source_path=path,
        )
