"""
Schema resolver that transforms the AST into a type graph.

Phase 2 of the pipeline: resolve references, merge allOf parts, build
class, enum, array, map and union types, and assign every named type a
unique display name.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..errors import SchemaResolutionError
from ..schema_ast.nodes import (
    AllOfNode,
    ArrayNode,
    ConstNode,
    DefinitionNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaAST,
    SchemaNode,
    UnionNode,
)
from ..type_graph import (
    ArrayType,
    ClassProperty,
    ClassType,
    EnumCase,
    EnumType,
    MapType,
    NamedType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    TransformedStringType,
    TypeGraph,
    TypeRef,
    UnionType,
)
from .name_resolver import NameResolver, enum_case_names, property_display_name, singularize
from .reference_resolver import ROOT_REF, ReferenceResolver, ResolvedRef

logger = logging.getLogger(__name__)

# String formats that get their own type
TRANSFORMED_FORMATS = {"date-time", "date", "time", "uuid", "uri", "integer-string", "bool-string"}

PRIMITIVE_KINDS = {
    "null": PrimitiveKind.NULL,
    "boolean": PrimitiveKind.BOOL,
    "integer": PrimitiveKind.INTEGER,
    "number": PrimitiveKind.DOUBLE,
    "string": PrimitiveKind.STRING,
    "any": PrimitiveKind.ANY,
}


class SchemaResolver:
    """Resolves a schema AST into a type graph."""

    def __init__(self):
        self.ast: SchemaAST | None = None
        self.ref_resolver: ReferenceResolver | None = None
        self.names = NameResolver()
        self.graph = TypeGraph()

        # Cache key ("#" or definition path) -> resolved type
        self._resolved: dict[str, TypeRef] = {}
        self._resolving: set[str] = set()
        self._external: dict[str, ObjectType] = {}

    def resolve(self, ast: SchemaAST) -> TypeGraph:
        """
        Resolve the AST into a type graph.

        Named types are listed in the order a depth-first walk from the
        root discovers them, followed by definitions the root never reaches.

        Args:
            ast: The parsed schema AST

        Returns:
            The resolved type graph

        Raises:
            SchemaResolutionError: If a reference cannot be resolved or the
                schema uses an unsupported construct
        """
        self.ast = ast
        self.ref_resolver = ReferenceResolver(ast)
        self.names = NameResolver()
        self.graph = TypeGraph()
        self._resolved = {}
        self._resolving = set()
        self._external = {}

        root = self._resolve_keyed(ROOT_REF, ast.root_node, ast.root_name)
        self.graph.top_level[ast.root_name] = root

        for def_node in ast.definitions:
            self._resolve_keyed(def_node.source_path, def_node.body, self._definition_name(def_node))

        logger.debug("Resolved %d named types", len(self.graph.names))
        return self.graph

    def _definition_name(self, def_node: DefinitionNode) -> str:
        if def_node.body is not None and def_node.body.title:
            return def_node.body.title
        return def_node.name

    def _resolve_keyed(self, key: str, node: SchemaNode | None, preferred: str) -> TypeRef:
        """Resolve the root or a definition once, caching the result under its key."""
        if key in self._resolved:
            return self._resolved[key]
        if key in self._resolving:
            raise SchemaResolutionError(f"Recursive reference to {key!r} must go through an object type")
        if node is None:
            return PrimitiveType(kind=PrimitiveKind.ANY)

        self._resolving.add(key)
        try:
            t = self._resolve_node(node, preferred, None, key)
        finally:
            self._resolving.discard(key)

        self._resolved[key] = t
        if isinstance(t, UnionType) and t not in self.graph.named_types:
            # Named unions are listed like any other named entry
            self.graph.named_types.append(t)
        return t

    def _resolve_node(
        self,
        node: SchemaNode,
        preferred: str,
        parent_name: str | None,
        key: str | None = None,
    ) -> TypeRef:
        """
        Resolve a schema node into a type reference.

        Args:
            node: The node to resolve
            preferred: Name to use if the node becomes a named type
            parent_name: Display name of the enclosing class, if any
            key: Cache key when the node is the root or a definition body
        """
        match node:
            case RefNode():
                return self._resolve_ref(node)
            case PrimitiveNode():
                return self._resolve_primitive(node)
            case ConstNode():
                return self._resolve_const(node, preferred, parent_name, key)
            case EnumNode():
                return self._resolve_enum(node, preferred, parent_name, key)
            case ArrayNode(items=None):
                return ArrayType(items=PrimitiveType(kind=PrimitiveKind.ANY))
            case ArrayNode(items=items):
                return ArrayType(items=self._resolve_node(items, singularize(preferred), parent_name))
            case ObjectNode(properties=[]):
                values = node.additional_properties
                if values is None:
                    return MapType(values=PrimitiveType(kind=PrimitiveKind.ANY))
                return MapType(values=self._resolve_node(values, singularize(preferred), parent_name))
            case ObjectNode():
                return self._resolve_object(node, preferred, parent_name, key)
            case UnionNode() if key is not None:
                return self._resolve_keyed_union(node, preferred, parent_name, key)
            case UnionNode(variants=variants):
                return self._make_union([self._resolve_node(v, preferred, parent_name) for v in variants])
            case AllOfNode():
                return self._resolve_allof(node, preferred, parent_name, key)
            case _:
                raise SchemaResolutionError(f"Unsupported schema node {type(node).__name__} at {node.source_path}")

    def _resolve_ref(self, node: RefNode) -> TypeRef:
        resolved = self.ref_resolver.resolve(node)
        if resolved.is_external:
            return self._external_object(resolved)
        if resolved.is_root:
            return self._resolve_keyed(ROOT_REF, self.ast.root_node, self.ast.root_name)
        return self._resolve_keyed(resolved.key, resolved.target_node.body, self._definition_name(resolved.target_node))

    def _external_object(self, resolved: ResolvedRef) -> ObjectType:
        """Get the named object standing in for an external $ref."""
        if resolved.key not in self._external:
            obj = ObjectType(type_id=resolved.key)
            self._register(obj, resolved.external_name, None)
            self._external[resolved.key] = obj
        return self._external[resolved.key]

    def _resolve_primitive(self, node: PrimitiveNode) -> TypeRef:
        if node.type_name == "string" and node.format in TRANSFORMED_FORMATS:
            return TransformedStringType(format=node.format)
        return PrimitiveType(kind=PRIMITIVE_KINDS[node.type_name])

    def _resolve_const(self, node: ConstNode, preferred: str, parent_name: str | None, key: str | None) -> TypeRef:
        """String constants become single-case enums; other constants their primitive type."""
        if isinstance(node.value, str):
            enum_node = EnumNode(
                values=[node.value],
                source_path=node.source_path,
                title=node.title,
                description=node.description,
            )
            return self._resolve_enum(enum_node, preferred, parent_name, key)
        return self._primitive_for_value(node.value)

    def _resolve_enum(self, node: EnumNode, preferred: str, parent_name: str | None, key: str | None) -> TypeRef:
        """Resolve an enum; non-string values are kept as primitive union members."""
        strings: list[str] = []
        members: list[TypeRef] = []
        for value in node.values:
            if isinstance(value, str):
                if value not in strings:
                    strings.append(value)
            else:
                members.append(self._primitive_for_value(value))

        if strings:
            enum = EnumType(type_id=key or node.source_path, description=self._type_description(node, key))
            enum.cases = [EnumCase(name=name, json_name=value) for name, value in zip(enum_case_names(strings), strings)]
            self._register(enum, self._preferred_name(node, preferred, key), parent_name)
            members.insert(0, enum)

        return self._make_union(members)

    def _resolve_object(self, node: ObjectNode, preferred: str, parent_name: str | None, key: str | None) -> ClassType:
        cls = self._new_class(node, preferred, parent_name, key)

        # Registered before the properties so recursive references find it
        if key is not None:
            self._resolved[key] = cls

        self._fill_class(cls, node)
        return cls

    def _new_class(self, node: ObjectNode, preferred: str, parent_name: str | None, key: str | None) -> ClassType:
        cls = ClassType(type_id=key or node.source_path, description=self._type_description(node, key))
        self._register(cls, self._preferred_name(node, preferred, key), parent_name)
        return cls

    def _fill_class(self, cls: ClassType, node: ObjectNode) -> None:
        class_name = self.graph.names[cls]
        for prop in node.properties:
            prop_type = self._resolve_node(prop.type_node, prop.name, class_name)
            cls.properties.append(
                ClassProperty(
                    name=property_display_name(prop.name),
                    json_name=prop.name,
                    type=prop_type,
                    is_optional=not prop.is_required,
                    description=self._lines(prop.type_node.description),
                )
            )

    def _resolve_keyed_union(self, node: UnionNode, preferred: str, parent_name: str | None, key: str) -> TypeRef:
        """
        Resolve a root or definition union whose object variants may refer back to it.

        Classes for the object variants are registered first, and the union is
        cached under its key before their properties are resolved. A cycle that
        never passes through one of those classes still raises.
        """
        classes: dict[int, ClassType] = {}
        for i, variant in enumerate(node.variants):
            if isinstance(variant, ObjectNode) and variant.properties:
                classes[i] = self._new_class(variant, preferred, parent_name, None)

        # A nullable definition describes its one class
        if len(classes) == 1:
            cls = next(iter(classes.values()))
            if cls.description is None:
                cls.description = self._type_description(node, key)

        members = [classes[i] if i in classes else self._resolve_node(v, preferred, parent_name) for i, v in enumerate(node.variants)]
        union = self._make_union(members)
        self._resolved[key] = union

        for i, cls in classes.items():
            self._fill_class(cls, node.variants[i])
        return union

    def _resolve_allof(self, node: AllOfNode, preferred: str, parent_name: str | None, key: str | None) -> TypeRef:
        """Resolve allOf by merging the properties of all its parts into one object."""
        if len(node.parts) == 1:
            return self._resolve_node(node.parts[0], preferred, parent_name, key)

        merged = ObjectNode(source_path=node.source_path, title=node.title, description=node.description)
        self._merge_into(merged, node, set())
        merged.properties = [replace(p, is_required=p.is_required or p.name in merged.required) for p in merged.properties]
        return self._resolve_node(merged, preferred, parent_name, key)

    def _merge_into(self, target: ObjectNode, node: SchemaNode, seen: set[str]) -> None:
        match node:
            case RefNode():
                resolved = self.ref_resolver.resolve(node)
                if resolved.is_external:
                    raise SchemaResolutionError(f"Cannot merge external $ref {node.ref_path!r} at {node.source_path}")
                if resolved.key in seen:
                    return
                seen.add(resolved.key)
                body = self.ast.root_node if resolved.is_root else resolved.target_node.body
                if body is not None:
                    self._merge_into(target, body, seen)
            case AllOfNode(parts=parts):
                for part in parts:
                    self._merge_into(target, part, seen)
            case ObjectNode():
                for prop in node.properties:
                    target.properties = [p for p in target.properties if p.name != prop.name]
                    target.properties.append(prop)
                target.required.extend(r for r in node.required if r not in target.required)
                if target.additional_properties is None:
                    target.additional_properties = node.additional_properties
            case PrimitiveNode(type_name="any"):
                # Constraint-only parts add nothing to the shape
                return
            case _:
                raise SchemaResolutionError(f"allOf at {target.source_path} can only combine object schemas")

    def _make_union(self, members: list[TypeRef]) -> TypeRef:
        """Build a union, flattening nested unions and dropping duplicates."""
        flat: list[TypeRef] = []
        for member in members:
            for t in member.members if isinstance(member, UnionType) else (member,):
                if t not in flat:
                    flat.append(t)

        if not flat:
            return PrimitiveType(kind=PrimitiveKind.ANY)
        if len(flat) == 1:
            return flat[0]
        return UnionType(members=tuple(flat))

    def _register(self, t: NamedType, preferred: str, parent_name: str | None) -> str:
        """Assign a display name and append the type to the document order."""
        name = self.names.assign(preferred, parent_name)
        self.graph.names[t] = name
        self.graph.named_types.append(t)
        return name

    def _preferred_name(self, node: SchemaNode, preferred: str, key: str | None) -> str:
        # The root is always named after the schema name
        if key == ROOT_REF or not node.title:
            return preferred
        return node.title

    def _type_description(self, node: SchemaNode, key: str | None) -> list[str] | None:
        """Only root and definition descriptions describe the type; inline ones describe the property."""
        if key is None:
            return None
        return self._lines(node.description)

    @staticmethod
    def _lines(text: str | None) -> list[str] | None:
        if not text:
            return None
        return text.splitlines()

    @staticmethod
    def _primitive_for_value(value: object) -> PrimitiveType:
        """Infer the primitive type of a JSON value."""
        if value is None:
            return PrimitiveType(kind=PrimitiveKind.NULL)
        if isinstance(value, bool):
            return PrimitiveType(kind=PrimitiveKind.BOOL)
        if isinstance(value, int):
            return PrimitiveType(kind=PrimitiveKind.INTEGER)
        if isinstance(value, float):
            return PrimitiveType(kind=PrimitiveKind.DOUBLE)
        if isinstance(value, str):
            return PrimitiveType(kind=PrimitiveKind.STRING)
        return PrimitiveType(kind=PrimitiveKind.ANY)
