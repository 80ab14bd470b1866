"""Entries directory loader and index file writer.

Reads every entry file in a directory, parses each one independently, and
writes the compiled index. By default the first bad entry aborts the run;
``keep_going`` collects failures instead so the remaining entries are
still indexed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from reggen.exceptions import EntryLoadError, EntryParseError
from reggen.registry.entry_parser import parse_entry
from reggen.registry.index_builder import build_index, dumps_index
from reggen.registry.models import Entry, IndexDocument
from reggen.utils.file_scanner import identifier_for, scan_entry_files

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Entries parsed from a directory, plus any skipped failures."""

    entries: dict[str, Entry] = field(default_factory=dict)
    failures: list[EntryLoadError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def load_entry(path: str | Path) -> Entry:
    """Read and parse a single entry file."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise EntryLoadError(f"failed to read entry file {path.name}: {e}", path, e) from e

    try:
        return parse_entry(raw)
    except EntryParseError as e:
        raise EntryLoadError(
            f"failed to create entry with {path.name}: {e}", path, e
        ) from e


def load_entries(input_dir: str | Path, keep_going: bool = False) -> LoadResult:
    """Parse every entry file in ``input_dir``.

    Raises:
        EntryLoadError: the directory cannot be read, or an entry fails and
            ``keep_going`` is False.
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise EntryLoadError(f"input directory not found: {input_dir}", input_dir)

    try:
        paths = scan_entry_files(input_dir)
    except OSError as e:
        raise EntryLoadError(f"failed to read input directory {input_dir}: {e}", input_dir, e) from e

    result = LoadResult()
    for path in paths:
        try:
            entry = load_entry(path)
        except EntryLoadError as e:
            if not keep_going:
                raise
            logger.warning("Skipping %s: %s", path.name, e)
            result.failures.append(e)
            continue
        result.entries[identifier_for(path)] = entry

    logger.debug(
        "Loaded %d entries from %s (%d skipped)",
        len(result.entries),
        input_dir,
        len(result.failures),
    )
    return result


def write_index(
    output: str | Path,
    entries: dict[str, Entry],
    indent: int | None = None,
) -> IndexDocument:
    """Build the index for ``entries`` and write it to ``output``."""
    output = Path(output)
    document = build_index(entries)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(dumps_index(document, indent=indent))
    except OSError as e:
        raise EntryLoadError(f"failed to write index file {output}: {e}", output, e) from e

    logger.info("Wrote %d entries to %s", len(document.index), output)
    return document


def generate_index(
    input_dir: str | Path,
    output: str | Path,
    keep_going: bool = False,
    indent: int | None = None,
) -> tuple[LoadResult, IndexDocument]:
    """Load ``input_dir`` and write its index to ``output``."""
    result = load_entries(input_dir, keep_going=keep_going)
    document = write_index(output, result.entries, indent=indent)
    return result, document
