"""Errors raised while materialising intent definitions."""

from __future__ import annotations


class ConstructionFailed(ValueError):
    """Raised when an intent specification cannot be turned into a definition."""

    def __init__(self, message: str, *, intent: str | None = None) -> None:
        self.intent = intent
        super().__init__(f"{intent}: {message}" if intent else message)


__all__ = ["ConstructionFailed"]
