# shape_schema/card.py
from __future__ import annotations

from .schema import ArraySchema, ObjectSchema, Schema

__all__ = ["to_markdown_card"]

def _label(node: Schema) -> str:
    """Return a one-line summary of *node*."""
    if isinstance(node, ArraySchema):
        return f"array of {_label(node.items)}"
    return node.kind

def _bullets(node: ObjectSchema, depth: int = 0) -> list[str]:
    """Return nested Markdown bullets for the fields of *node*."""
    lines: list[str] = []
    indent = "  " * depth
    for name, child in node.properties.items():
        lines.append(f"{indent}- **{name}**: {_label(child)}")
        inner = child.items if isinstance(child, ArraySchema) else child
        if isinstance(inner, ObjectSchema):
            lines.extend(_bullets(inner, depth + 1))
    return lines

def _section(node: Schema) -> list[str]:
    body = [_label(node)]
    inner = node.items if isinstance(node, ArraySchema) else node
    if isinstance(inner, ObjectSchema):
        body.extend(_bullets(inner))
    return body

def to_markdown_card(schema: Schema, *, heading_level: int = 2, title: str | None = None) -> str:
    """
    Convert a schema tree into a Markdown card.

    Parameters
    ----------
    schema : Schema
        Root node.  An ``object()`` root gets one section per field; any other
        root gets a single section.
    heading_level : int, default 2
        Markdown heading level for the sections (##, ###, …).
    title : str, optional
        Rendered as a heading one level above the sections.

    Returns
    -------
    str
        Markdown document.
    """
    h = "#" * heading_level
    parts: list[str] = []
    if title:
        parts.extend([f"{'#' * max(heading_level - 1, 1)} {title}", ""])

    if isinstance(schema, ObjectSchema):
        for name, child in schema.properties.items():
            parts.append(f"{h} {name.replace('_', ' ').title()}")
            parts.extend(_section(child))
            parts.append("")             # blank line after each section
    else:
        parts.append(f"{h} Value")
        parts.extend(_section(schema))
    return "\n".join(parts).rstrip()
