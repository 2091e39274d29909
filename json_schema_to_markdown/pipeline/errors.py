"""
Exceptions raised by the pipeline.
"""

from __future__ import annotations


class SchemaResolutionError(ValueError):
    """Raised when a schema cannot be resolved into a type graph.

    This can happen when:
    - The document is not a JSON Schema object
    - A local $ref points at a definition that does not exist
    - The schema uses a construct the resolver does not support
    """

    pass
