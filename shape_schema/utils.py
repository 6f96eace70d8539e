"""
utils.py – shared, low-level utilities for the shape-schema package.

This module consolidates common helpers for:
- Runtime categories (the coarse "what kind of value is this" check)
- Display helpers (notebook-aware printing)
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

__all__ = ["runtime_type"]

# --------------------------------------------------------------------------- #
# Display Helper                                                              #
# --------------------------------------------------------------------------- #

def _display(obj: Any, **print_kwargs) -> None:
    """Pretty-print that degrades gracefully outside Jupyter."""
    try:
        get_ipython  # type: ignore  # noqa: F401
        from IPython.display import display  # type: ignore

        display(obj)
    except (NameError, ImportError):
        print(obj, **print_kwargs)

# --------------------------------------------------------------------------- #
# Runtime Categories                                                          #
# --------------------------------------------------------------------------- #

RUNTIME_TYPES: tuple[str, ...] = ("null", "boolean", "number", "string", "function", "object")


def runtime_type(value: Any) -> str:
    """Return the runtime category of *value*.

    The check is shallow on purpose: containers, dates and arbitrary
    instances all report ``"object"``.  ``bool`` is tested before numbers
    because it subclasses ``int``; ``numpy.bool_`` reports ``"boolean"`` too.
    """
    if value is None:
        return "null"
    if isinstance(value, (bool, np.bool_)):
        return "boolean"
    if isinstance(value, numbers.Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"
