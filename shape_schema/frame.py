"""
frame.py - per-column checks of a pandas DataFrame against an object schema.

An ``object()`` node does not look at its fields, so tabular data is checked
the manual way: every cell of a column goes through the matching
``properties[column].validate``.  Missing cells (``None``, ``NaN``, ``NaT``,
``pd.NA``) are handed to the field as ``None`` and so report ``null``.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from .schema import ObjectSchema

__all__ = ["validate_frame"]


def _cell(value: Any) -> Any:
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def validate_frame(schema: ObjectSchema, frame: pd.DataFrame) -> pd.DataFrame:
    """Return a frame of issue messages aligned with *frame*.

    One column per frame column that names a schema property, in frame order
    (duplicated column names are checked one by one); a cell is ``None`` when
    the value passed and holds the first issue message otherwise.  Properties
    without a column are skipped and extra columns are ignored.
    """
    if not isinstance(schema, ObjectSchema):
        raise TypeError(f"validate_frame expects an object() schema, got {schema!r}")

    names: list[str] = []
    columns: list[list[str | None]] = []
    for pos, name in enumerate(frame.columns):
        child = schema.properties.get(name) if isinstance(name, str) else None
        if child is None:
            continue
        messages: list[str | None] = []
        # tolist() hands back native Python scalars
        for value in frame.iloc[:, pos].tolist():
            result = child.validate(_cell(value))
            messages.append(None if result.ok else result.issues[0]["message"])
        names.append(name)
        columns.append(messages)

    out = pd.DataFrame(dict(enumerate(columns)), index=frame.index, dtype=object)
    out.columns = names
    return out
