"""User-facing notification (toast) value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Notification:
    """
    A short message for the user.

    ``destructive`` marks failures and degraded outcomes; ``duration_ms`` is a
    display hint for transient progress messages.
    """

    title: str
    description: str | None = None
    destructive: bool = False
    duration_ms: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"title": self.title}
        if self.description:
            result["description"] = self.description
        if self.destructive:
            result["variant"] = "destructive"
        if self.duration_ms is not None:
            result["duration"] = self.duration_ms
        return result
