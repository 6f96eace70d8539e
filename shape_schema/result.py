"""
result.py - the validation result shape shared by every schema node.

A result is a plain ``dict`` so other tooling can consume it without knowing
about this package:

* success -> ``{"value": <validated input>}``
* failure -> ``{"issues": [{"message": "..."}, ...]}``
"""

from __future__ import annotations

from typing import Any, Callable, TypedDict

__all__ = ["Issue", "Result", "STANDARD_KEY", "standard_props"]

# Attribute name under which every node publishes its interop properties.
STANDARD_KEY = "~standard"


class Issue(TypedDict):
    message: str


class Result(dict):
    """Success-or-failure mapping returned by :meth:`Schema.validate`."""

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, *messages: str) -> "Result":
        if not messages:
            raise ValueError("A failed result needs at least one issue message.")
        return cls(issues=[Issue(message=m) for m in messages])

    @property
    def ok(self) -> bool:
        return "issues" not in self

    @property
    def value(self) -> Any:
        """The validated value; raises ``ValueError`` on a failed result."""
        if not self.ok:
            raise ValueError(self["issues"][0]["message"])
        return self["value"]

    @property
    def issues(self) -> list[Issue]:
        return self.get("issues", [])


def standard_props(validate: Callable[[Any], Result]) -> dict[str, Any]:
    """Build the ``~standard`` mapping (version 1, empty vendor) around *validate*."""
    return {"version": 1, "vendor": "", "validate": validate}
