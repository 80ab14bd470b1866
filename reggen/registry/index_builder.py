"""Index builder — reduce identifier/entry pairs into the index document.

Identifiers are assumed unique (one source file per identifier), and alias
targets are not resolved against the other entries.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from reggen.registry.models import Entry, IndexDocument


def build_index(entries: Mapping[str, Entry]) -> IndexDocument:
    """Build a new IndexDocument from a mapping of identifier to Entry."""
    return IndexDocument(
        index={identifier: entry.to_dict() for identifier, entry in entries.items()}
    )


def dumps_index(document: IndexDocument, indent: int | None = None) -> str:
    """Serialize an index document to JSON text.

    Keys are sorted so the output is stable for a given set of entries.
    Non-ASCII text and characters such as ``&``, ``<`` and ``>`` are
    written literally.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(
        document.to_dict(),
        indent=indent,
        separators=separators,
        sort_keys=True,
        ensure_ascii=False,
    )
    return text + "\n"
