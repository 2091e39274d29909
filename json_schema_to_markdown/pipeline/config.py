"""
Configuration for the Markdown generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class MarkdownConfig:
    """Configuration options for Markdown generation."""

    # Emit type declarations only, no runtime code. None means "not set by
    # the caller"; the document renderer turns it on.
    just_types: bool | None = None

    # Indentation unit for content nested under a bullet
    indentation: str = "    "

    # Render enums as a fenced declaration block instead of a variant list
    legacy_enum_blocks: bool = False

    # Add an HTML comment naming the generator at the top of the document
    add_generation_comment: bool = False

    @staticmethod
    def from_dict(d: dict) -> MarkdownConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = MarkdownConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
