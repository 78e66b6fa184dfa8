from __future__ import annotations


class PatgenError(Exception):
    """Base class for engine errors."""


class UnknownGeneratorError(PatgenError, KeyError):
    """Generator kind name outside the fixed set."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown generator"


class InvalidParamsError(PatgenError, ValueError):
    """Raised by caller-side parameter validation, never by generation itself."""
