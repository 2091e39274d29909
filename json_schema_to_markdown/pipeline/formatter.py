"""
Type-expression formatter.

Turns a type reference into an inline Markdown fragment. Named types become
links to their section anchor, and arrays whose element is itself compound
switch to an HTML-escaped ``Array&lt;...&gt;`` form so the expression stays
unambiguous once rendered. Everything else is delegated to a fallback
formatter, which by default follows TypeScript declaration syntax.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .type_graph import (
    ArrayType,
    ClassType,
    EnumType,
    MapType,
    NamedType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    TransformedStringType,
    TypeRef,
    UnionType,
)


@dataclass(frozen=True)
class Fragment:
    """An inline type expression.

    Attributes:
        source: Ordered text tokens making up the expression
        needs_parens: Whether the expression must be parenthesized before a
            suffix such as ``[]`` is appended to it
    """

    source: tuple[str, ...] = ()
    needs_parens: bool = False

    @property
    def text(self) -> str:
        return "".join(self.source)


NameLookup = Callable[[NamedType], str]
ChildFormatter = Callable[[TypeRef], Fragment]
FallbackFormatter = Callable[[TypeRef, ChildFormatter], Fragment]


def single_word(*source: str) -> Fragment:
    return Fragment(source=tuple(source), needs_parens=False)


def multi_word(separator: str, *words: Fragment) -> Fragment:
    """Join fragments with a separator; more than one word needs parentheses."""
    source: list[str] = []
    for i, word in enumerate(words):
        if i > 0:
            source.append(separator)
        source.extend(word.source)
    return Fragment(source=tuple(source), needs_parens=len(words) > 1)


def paren_if_needed(fragment: Fragment) -> tuple[str, ...]:
    if fragment.needs_parens:
        return ("(", *fragment.source, ")")
    return fragment.source


def code_span(text: str) -> str:
    """Wrap text in a Markdown code span fenced by more backticks than any run inside it."""
    longest = max((len(run) for run in re.findall(r"`+", text)), default=0)
    fence = "`" * (longest + 1)
    if longest:
        # One space on each side is stripped by the renderer
        return f"{fence} {text} {fence}"
    return f"{fence}{text}{fence}"


PRIMITIVE_DECLARATIONS = {
    PrimitiveKind.NULL: "null",
    PrimitiveKind.BOOL: "boolean",
    PrimitiveKind.INTEGER: "number",
    PrimitiveKind.DOUBLE: "number",
    PrimitiveKind.STRING: "string",
    PrimitiveKind.ANY: "any",
}


def format_declaration(t: TypeRef, format_child: ChildFormatter) -> Fragment:
    """
    Format a type using TypeScript declaration syntax.

    This is the baseline rule the Markdown formatter falls back to for kinds
    it does not customize. Map values and union members go through
    ``format_child`` so the caller's customizations apply to them too.

    Args:
        t: The type to format
        format_child: Formatter used for nested types

    Returns:
        The formatted fragment
    """
    match t:
        case PrimitiveType(kind=kind):
            return single_word(PRIMITIVE_DECLARATIONS[kind])
        case TransformedStringType(format="date-time"):
            return single_word("Date")
        case TransformedStringType():
            return single_word("string")
        case ArrayType(items=items):
            item = format_child(items)
            if isinstance(items, ArrayType | UnionType):
                return single_word("Array<", *item.source, ">")
            return single_word(*paren_if_needed(item), "[]")
        case MapType(values=values):
            return single_word("{ [key: string]: ", *format_child(values).source, " }")
        case UnionType(members=members):
            children = [single_word(*paren_if_needed(format_child(m))) for m in members]
            return multi_word(" | ", *children)
        case _:
            raise TypeError(f"No declaration syntax for {type(t).__name__}")


def format_type(
    t: TypeRef,
    name_for: NameLookup,
    fallback: FallbackFormatter = format_declaration,
) -> Fragment:
    """
    Format a type reference as an inline Markdown fragment.

    Args:
        t: The type to format
        name_for: Returns the display name of a named type
        fallback: Formatter for kinds without Markdown-specific rules

    Returns:
        The formatted fragment
    """

    def format_child(child: TypeRef) -> Fragment:
        return format_type(child, name_for, fallback)

    match t:
        case ClassType() | EnumType() | ObjectType():
            name = name_for(t)
            return single_word("<a href='#typedef-", name, "'>", name, "</a>")
        case ArrayType(items=items):
            item = format_child(items)
            if isinstance(items, ArrayType | UnionType):
                return single_word("Array&lt;", *item.source, "&gt;")
            return single_word(*paren_if_needed(item), "[]")
        case _:
            return fallback(t, format_child)
