"""
Error types raised by skillmatch.

Scoring itself has no error conditions: empty text and empty skill sets
are well defined.  Errors only come from malformed requests, from the
document-to-text collaborator and from host configuration.
"""

from __future__ import annotations

from typing import Optional


class SkillMatchError(Exception):
    """Base class for all skillmatch errors."""


class ValidationError(SkillMatchError, ValueError):
    """A match request is malformed.

    ``field`` names the violated constraint (e.g. ``top_k`` or
    ``jobs[1].id``) so the caller can report it back verbatim.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class ExtractionFailure(SkillMatchError):
    """Converting a document into plain text failed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"could not extract text from {source!r}: {reason}")


class ConfigError(SkillMatchError):
    """The host configuration could not be loaded or is invalid."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
