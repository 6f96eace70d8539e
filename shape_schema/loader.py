"""
loader.py - build schema trees from JSON-lite definitions.

A definition is the same compact shape :meth:`Schema.describe` emits::

    {"type": "object", "fields": {"name": {"type": "string"},
                                  "tags": {"type": "array", "items": {"type": "string"}}}}

Public API
----------
SchemaError   : raised for a malformed definition
from_dict()   : mapping -> Schema
load_schema() : JSON file on disk or bundled in ``shape_schema/schemas`` -> Schema
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Mapping

from . import schema as _s

__all__ = ["SchemaError", "from_dict", "load_schema"]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when a schema definition cannot be turned into a schema tree."""


_LEAVES: dict[str, Callable[[], _s.Schema]] = {
    "string": _s.string,
    "number": _s.number,
    "boolean": _s.boolean,
    "Date": _s.date,
    "date": _s.date,
}

# --------------------------------------------------------------------------- #
# Definition -> tree                                                          #
# --------------------------------------------------------------------------- #

def from_dict(definition: Mapping[str, Any], *, path: str = "root") -> _s.Schema:
    """Recursively build a schema tree from *definition*.

    ``fields`` without ``type`` implies an object.  ``nullable`` and
    ``default`` are accepted and routed through the matching node modifiers.
    """
    if not isinstance(definition, Mapping):
        raise SchemaError(f"{path}: expected a mapping, got {type(definition).__name__}")

    stype = definition.get("type")
    if stype is None and "fields" in definition:
        stype = "object"

    if not isinstance(stype, str):
        raise SchemaError(f"{path}: 'type' must be a single string, got {stype!r}")

    if stype in _LEAVES:
        node = _LEAVES[stype]()
    elif stype == "object":
        fields = definition.get("fields", {})
        if not isinstance(fields, Mapping):
            raise SchemaError(f"{path}.fields: expected a mapping, got {type(fields).__name__}")
        for name in fields:
            if not isinstance(name, str):
                raise SchemaError(f"{path}.fields: field names must be str, got {name!r}")
        node = _s.object({
            name: from_dict(child, path=f"{path}.fields.{name}")
            for name, child in fields.items()
        })
    elif stype == "array":
        if "items" not in definition:
            raise SchemaError(f"{path}: array definition requires 'items'")
        node = _s.array(from_dict(definition["items"], path=f"{path}.items"))
    else:
        raise SchemaError(f"{path}: unknown type {stype!r}")

    if definition.get("nullable"):
        node = node.nullable()
    if "default" in definition:
        node = node.default(definition["default"])
    return node

# --------------------------------------------------------------------------- #
# Files                                                                       #
# --------------------------------------------------------------------------- #

def _read(text: str, origin: str) -> Mapping[str, Any]:
    """Parse JSON *text*, raising crisp errors on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {origin}: {exc}") from exc


def load_schema(path: str | Path) -> _s.Schema:
    p = Path(path)

    # 1) direct file on disk ------------------------------------------------
    if p.is_file():
        return from_dict(_read(p.read_text(encoding="utf-8"), str(p)))

    # 2) bundled resource (basename first, original second) ----------------
    pkg = resources.files("shape_schema").joinpath("schemas")
    for name in (p.name, str(path)):
        resource = pkg.joinpath(name)
        if resource.is_file():
            return from_dict(_read(resource.read_text(encoding="utf-8"), name))

    # 3) give up -----------------------------------------------------------
    raise FileNotFoundError(
        f"Schema '{path}' not found on disk or in package data"
    )
