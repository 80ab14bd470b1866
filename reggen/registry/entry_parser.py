"""Entry parser — turn a raw entry document into a typed Entry.

Parsing runs in three steps:
1. Decode the JSON (malformed input is rejected before anything else)
2. Sniff the ``type`` discriminator to pick the tooth or alias schema
3. Validate against that schema, then extract fields into the variant

Documents without a ``type`` field, or with any value other than
``"alias"``, are treated as tooth entries. A typo in the discriminator
therefore surfaces as a tooth schema violation on ``$.type``.
"""

from __future__ import annotations

import logging

from reggen.registry.models import AliasEntry, Entry, EntryKind, ToothEntry
from reggen.spec.schema_validator import decode_document, enforce_schema

logger = logging.getLogger(__name__)


def parse_entry(raw: bytes | str) -> Entry:
    """Parse raw entry content into a ToothEntry or AliasEntry.

    Raises:
        MalformedInputError: content is not JSON.
        SchemaViolationError: content fails the schema of its sniffed kind.
    """
    data = decode_document(raw)
    kind = sniff_kind(data)
    logger.debug("Sniffed entry kind %s", kind.value)

    enforce_schema(data, kind)

    if kind is EntryKind.ALIAS:
        return _alias_from_document(data)
    return _tooth_from_document(data)


def sniff_kind(data) -> EntryKind:
    """Pick the entry kind from the ``type`` discriminator. Never raises."""
    if isinstance(data, dict) and data.get("type") == EntryKind.ALIAS.value:
        return EntryKind.ALIAS
    return EntryKind.TOOTH


def _tooth_from_document(data: dict) -> ToothEntry:
    info = data["information"]
    return ToothEntry(
        tooth=data["tooth"],
        author=info["author"],
        description=info["description"],
        name=info["name"],
        homepage=info.get("homepage", ""),
        license=info.get("license", ""),
        repository=info.get("repository", ""),
        tags=tuple(info.get("tags", [])),
    )


def _alias_from_document(data: dict) -> AliasEntry:
    return AliasEntry(target=data["target"])
