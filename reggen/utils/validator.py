"""Validator — check a single entry file for correctness.

This module provides a report-style validation interface for contributors
checking their entry before submitting it. The build pipeline itself uses
reggen.registry.entry_parser, which stops at the first violation.
"""

from pathlib import Path

from reggen.exceptions import MalformedInputError
from reggen.registry.entry_parser import sniff_kind
from reggen.spec.schema_validator import decode_document, validate_schema


def validate_entry_file(entry_path: str) -> list[str]:
    """Validate an entry JSON file.

    Returns a list of issues found. Empty list means valid.
    """
    path = Path(entry_path)

    if not path.exists():
        return [f"File not found: {entry_path}"]

    try:
        data = decode_document(path.read_bytes())
    except MalformedInputError as e:
        return [f"Invalid JSON: {e.details}"]

    return validate_schema(data, sniff_kind(data))
