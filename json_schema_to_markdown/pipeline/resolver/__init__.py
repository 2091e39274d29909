"""
Resolver module.

Contains reference resolution, name resolution, and type graph building.
"""

from __future__ import annotations

from ..errors import SchemaResolutionError
from .name_resolver import NameResolver
from .reference_resolver import ReferenceResolver, ResolvedRef
from .resolver import SchemaResolver

__all__ = [
    "NameResolver",
    "ReferenceResolver",
    "ResolvedRef",
    "SchemaResolutionError",
    "SchemaResolver",
]
