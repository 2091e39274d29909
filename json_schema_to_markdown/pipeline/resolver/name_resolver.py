"""
Name resolver for handling naming collisions and case conversion.

Assigns every named type a unique PascalCase display name, and gives
enum cases and properties the names shown in the rendered document.
"""

from __future__ import annotations

import json
import re

# Runs of letters and digits in any script
_RUN_PATTERN = re.compile(r"[^\W_]+")


def _split_words(run: str) -> list[str]:
    """Split a letter/digit run on camelCase, acronym and digit boundaries."""
    words = []
    start = 0
    for i in range(1, len(run)):
        prev, cur = run[i - 1], run[i]
        nxt = run[i + 1] if i + 1 < len(run) else ""
        if (
            (prev.islower() and cur.isupper())
            or (prev.isupper() and cur.isupper() and nxt.islower())
            or (prev.isdigit() != cur.isdigit())
        ):
            words.append(run[start:i])
            start = i
    words.append(run[start:])
    return words


def to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case, camelCase or spaced text to PascalCase.

    Letters outside ASCII are kept; scripts without case are left as they are.

    Examples:
        "first_name" -> "FirstName"
        "shipping-address" -> "ShippingAddress"
        "lineItem" -> "LineItem"
        "RED" -> "Red"
        "größe" -> "Größe"
    """
    words = [word for run in _RUN_PATTERN.findall(text) for word in _split_words(run)]
    return "".join(word.capitalize() for word in words)


def singularize(text: str) -> str:
    """Best-effort English singular, used to name array item types."""
    if text.endswith("ies") and len(text) > 3:
        return text[:-3] + "y"
    if text.endswith("s") and not text.endswith("ss") and len(text) > 1:
        return text[:-1]
    return text


def property_display_name(json_name: str) -> str:
    """Property keys are shown as-is when they are identifiers, quoted otherwise."""
    if json_name.replace("$", "_").isidentifier():
        return json_name
    return json.dumps(json_name, ensure_ascii=False)


class NameResolver:
    """Hands out display names that are unique within one document."""

    def __init__(self, fallback_name: str = "Type"):
        self.fallback_name = fallback_name
        self._taken: set[str] = set()

    def assign(self, preferred: str, parent_name: str | None = None) -> str:
        """
        Reserve a unique display name.

        Collisions are resolved by prefixing the parent's name first, then
        by appending a counter.

        Args:
            preferred: Name the type would like (title, definition key, ...)
            parent_name: Display name of the type that introduced this one

        Returns:
            The reserved display name
        """
        base = to_pascal_case(preferred) or self.fallback_name

        candidates = [base]
        if parent_name:
            candidates.append(f"{parent_name}{base}")

        for candidate in candidates:
            if candidate not in self._taken:
                self._taken.add(candidate)
                return candidate

        counter = 2
        while f"{base}{counter}" in self._taken:
            counter += 1
        name = f"{base}{counter}"
        self._taken.add(name)
        return name


def enum_case_names(values: list[str]) -> list[str]:
    """Assign unique PascalCase names to enum values, in order."""
    resolver = NameResolver(fallback_name="Empty")
    return [resolver.assign(value) for value in values]
