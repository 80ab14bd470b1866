"""reggen exception hierarchy.

All reggen-specific exceptions inherit from RegistryGeneratorError,
so the CLI can report any failure with a single except clause.
"""

from __future__ import annotations

from pathlib import Path

MALFORMED_INPUT = "malformed input"
SCHEMA_VIOLATION = "schema violation"


class RegistryGeneratorError(Exception):
    """Base exception for all reggen errors."""


class EntryParseError(RegistryGeneratorError):
    """An entry document could not be turned into an Entry.

    ``stage`` names the pipeline step that rejected the document.
    """

    def __init__(self, stage: str, message: str, details: str = ""):
        self.stage = stage
        self.message = message
        self.details = details
        super().__init__(f"{stage}: {message}" if message else stage)


class MalformedInputError(EntryParseError):
    """Raw bytes are not a JSON document at all."""

    def __init__(self, message: str, details: str = ""):
        super().__init__(MALFORMED_INPUT, message, details)


class SchemaViolationError(EntryParseError):
    """Document is valid JSON but does not satisfy its entry schema."""

    def __init__(self, path: str, reason: str, issues: list[str] | None = None):
        self.path = path
        self.reason = reason
        self.issues = list(issues) if issues else [f"{path}: {reason}"]
        super().__init__(SCHEMA_VIOLATION, f"{path}: {reason}", "\n".join(self.issues))


class EntryLoadError(RegistryGeneratorError):
    """Failure while reading or parsing an entry file."""

    def __init__(
        self,
        message: str,
        source: str | Path | None = None,
        cause: Exception | None = None,
    ):
        self.source = str(source) if source is not None else None
        self.cause = cause
        super().__init__(message)
