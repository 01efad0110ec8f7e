"""Error types shared by the assistant layers."""

from __future__ import annotations


class DwightError(Exception):
    """Base class for assistant errors surfaced to callers."""


class InvalidInput(DwightError, ValueError):
    """Raised when a caller passes input an operation cannot accept."""
