"""
Reference resolver for $ref resolution.

Resolves $ref paths to their definitions in the schema, or identifies
them as external references.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import SchemaResolutionError
from ..schema_ast.nodes import DefinitionNode, RefNode, SchemaAST

ROOT_REF = "#"


@dataclass
class ResolvedRef:
    """A resolved $ref."""

    key: str = ""  # Cache key for the target: definition path, "#" or external path
    target_node: DefinitionNode | None = None  # Resolved definition (local refs only)
    is_root: bool = False  # Whether the ref points at the schema root
    is_external: bool = False
    external_name: str = ""  # Type name taken from an external ref


class ReferenceResolver:
    """Resolves $ref to actual definitions."""

    def __init__(self, ast: SchemaAST):
        """
        Initialize the resolver.

        Args:
            ast: The parsed schema AST
        """
        self.ast = ast
        self._definition_cache: dict[str, DefinitionNode] = {def_node.source_path: def_node for def_node in ast.definitions}

    def resolve(self, ref_node: RefNode) -> ResolvedRef:
        """
        Resolve a $ref node to its target.

        Raises:
            SchemaResolutionError: If a local $ref has no target in this schema
        """
        ref_path = ref_node.ref_path

        if not ref_path.startswith("#"):
            return self._resolve_external_ref(ref_path)

        if ref_path == ROOT_REF:
            return ResolvedRef(key=ROOT_REF, is_root=True)

        def_node = self._definition_cache.get(ref_path)
        if def_node is None:
            raise SchemaResolutionError(f"Unresolvable $ref {ref_path!r} at {ref_node.source_path}")

        return ResolvedRef(key=ref_path, target_node=def_node)

    def _resolve_external_ref(self, ref_path: str) -> ResolvedRef:
        """Resolve an external $ref (doesn't start with #)."""
        # Parse: "other.json#/$defs/ClassName" or "other.json"
        if "#/$defs/" in ref_path:
            _, class_name = ref_path.split("#/$defs/", 1)
        elif "#/definitions/" in ref_path:
            _, class_name = ref_path.split("#/definitions/", 1)
        else:
            class_name = ref_path.split("#", 1)[0].rstrip("/").split("/")[-1]
            class_name = class_name.removesuffix(".json").removesuffix(".schema")

        return ResolvedRef(key=ref_path, is_external=True, external_name=class_name)
