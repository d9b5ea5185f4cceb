"""
Error types and helpers for user-facing diagnostics.
"""

from collections.abc import Mapping
from typing import Any, Optional


class AbstractInstantiationError(TypeError):
    """Raised when an abstract specification is constructed directly."""

    def __init__(self, cls: type):
        self.cls = cls
        super().__init__(f"{cls.__name__} is abstract and cannot be instantiated directly.")


def build_error(
    error: str,
    *,
    details: Optional[str] = None,
    hint: Optional[str] = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"error": error}
    if details:
        payload["details"] = details
    if hint:
        payload["hint"] = hint
    return payload


def error_lines(payload: Mapping[str, Any]) -> list[str]:
    lines = []
    error = payload.get("error") or "Unknown error."
    lines.append(f"Error: {error}")
    details = payload.get("details")
    if details:
        lines.append(f"Details: {details}")
    hint = payload.get("hint")
    if hint:
        lines.append(f"Hint: {hint}")
    return lines
