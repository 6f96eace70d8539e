"""
shape_schema – composable runtime schema nodes with a shared validation result.
"""
from .schema import (
    Schema,
    StringSchema,
    NumberSchema,
    BooleanSchema,
    DateSchema,
    ObjectSchema,
    ArraySchema,
    string,
    number,
    boolean,
    date,
    object,
    array,
)
from .result import Result
from .utils import runtime_type
from .loader import SchemaError, from_dict, load_schema
from .card import to_markdown_card
from .frame import validate_frame

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
    "Result",
    "runtime_type",
    "SchemaError",
    "from_dict",
    "load_schema",
    "to_markdown_card",
    "validate_frame",
]
