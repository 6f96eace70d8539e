"""
schema.py - composable schema nodes
===================================

Every node carries a fixed ``kind`` tag and shares one contract:

``validate(input) -> Result``
    Shallow check of ``runtime_type(input)`` against ``kind``.  Containers do
    **not** recurse into their children; callers validate fields or items
    through ``properties`` / ``items`` themselves.

``parse(input) -> output``
    Unchecked cast.  The input is returned untouched and never validated.

``nullable()`` / ``default(value)``
    Return the node itself.  They widen nothing and store nothing.

Known quirks kept as part of the contract: a ``date()`` node never accepts a
``datetime`` (its runtime category is ``"object"``, not ``"Date"``) and an
``array()`` node never accepts a ``list`` for the same reason.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar, cast

from .result import STANDARD_KEY, Result, standard_props
from .utils import runtime_type

__all__ = [
    "Schema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "DateSchema",
    "ObjectSchema",
    "ArraySchema",
    "string",
    "number",
    "boolean",
    "date",
    "object",
    "array",
]

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")
TItemIn = TypeVar("TItemIn")
TItemOut = TypeVar("TItemOut")
P = TypeVar("P", bound=Mapping[str, "Schema"])

# --------------------------------------------------------------------------- #
# Base contract                                                               #
# --------------------------------------------------------------------------- #

class Schema(Generic[TInput, TOutput]):
    """Base node: a ``kind`` tag plus the shared validate/parse contract."""

    kind: ClassVar[str] = "schema"

    def __init__(self) -> None:
        setattr(self, STANDARD_KEY, standard_props(self.validate))

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "kind":
            raise AttributeError(f"'{type(self).__name__}.kind' is fixed and cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def standard(self) -> dict[str, Any]:
        """Interop properties, also reachable as ``getattr(node, "~standard")``."""
        return getattr(self, STANDARD_KEY)

    def validate(self, input: Any) -> Result:
        actual = runtime_type(input)
        if actual == self.kind:
            return Result.success(input)
        return Result.failure(f"Expected {self.kind} but got {actual}")

    def parse(self, input: TInput) -> TOutput:
        return cast(TOutput, input)

    def nullable(self) -> "Schema[Optional[TInput], Optional[TOutput]]":
        return self  # type: ignore[return-value]

    def default(self, value: TInput) -> "Schema[Optional[TInput], TOutput]":
        return self  # type: ignore[return-value]

    def describe(self) -> dict[str, Any]:
        """Return the node in JSON-lite definition form (see :mod:`loader`)."""
        return {"type": self.kind}

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

# --------------------------------------------------------------------------- #
# Primitive leaves                                                            #
# --------------------------------------------------------------------------- #

class StringSchema(Schema[str, str]):
    kind = "string"

    def __repr__(self) -> str:
        return "string()"


class NumberSchema(Schema[float, float]):
    kind = "number"

    def __repr__(self) -> str:
        return "number()"


class BooleanSchema(Schema[bool, bool]):
    kind = "boolean"

    def __repr__(self) -> str:
        return "boolean()"


class DateSchema(Schema[_dt.datetime, _dt.datetime]):
    # The tag is not a runtime category, so validate() always reports a mismatch.
    kind = "Date"

    def __repr__(self) -> str:
        return "date()"

# --------------------------------------------------------------------------- #
# Containers                                                                  #
# --------------------------------------------------------------------------- #

class ObjectSchema(Schema[dict[str, Any], dict[str, Any]], Generic[P]):
    """A fixed mapping of field name -> child schema.

    ``properties`` is the very mapping given at construction.  The node's own
    ``validate`` only checks that the input is an object; use
    ``properties[name].validate(...)`` for per-field checks.
    """

    kind = "object"

    def __init__(self, properties: P) -> None:
        if not isinstance(properties, Mapping):
            raise TypeError(f"object() expects a mapping of field name -> Schema, got {type(properties).__name__}")
        for name, child in properties.items():
            if not isinstance(name, str):
                raise TypeError(f"Field names must be str, got {type(name).__name__}")
            if not isinstance(child, Schema):
                raise TypeError(f"Field '{name}' must be a Schema, got {type(child).__name__}")
        super().__init__()
        self.properties = properties

    def describe(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "fields": {name: child.describe() for name, child in self.properties.items()},
        }

    def __repr__(self) -> str:
        return f"object({dict(self.properties)!r})"


class ArraySchema(Schema[list[TItemIn], list[TItemOut]]):
    """A homogeneous sequence; ``items`` describes every element."""

    kind = "array"

    def __init__(self, items: Schema[TItemIn, TItemOut]) -> None:
        if not isinstance(items, Schema):
            raise TypeError(f"array() expects a Schema for its items, got {type(items).__name__}")
        super().__init__()
        self.items = items

    def describe(self) -> dict[str, Any]:
        return {"type": self.kind, "items": self.items.describe()}

    def __repr__(self) -> str:
        return f"array({self.items!r})"

# --------------------------------------------------------------------------- #
# Constructors                                                                #
# --------------------------------------------------------------------------- #

def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def boolean() -> BooleanSchema:
    return BooleanSchema()


def date() -> DateSchema:
    return DateSchema()


def object(properties: P) -> ObjectSchema[P]:  # noqa: A001
    return ObjectSchema(properties)


def array(items: Schema[TItemIn, TItemOut]) -> ArraySchema[TItemIn, TItemOut]:
    return ArraySchema(items)
