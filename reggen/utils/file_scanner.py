"""File scanner — discover entry files in an entries directory."""

from pathlib import Path

# Only files with this extension are entries; everything else is skipped
ENTRY_SUFFIX = ".json"


def scan_entry_files(input_dir: Path) -> list[Path]:
    """List the entry files directly inside ``input_dir``, sorted by name.

    Subdirectories are not descended into.
    """
    files = []
    for item in Path(input_dir).iterdir():
        if item.is_file() and _should_include(item):
            files.append(item)
    return sorted(files, key=lambda p: p.name)


def _should_include(path: Path) -> bool:
    """Check if a file is an entry file."""
    return path.suffix == ENTRY_SUFFIX


def identifier_for(path: Path) -> str:
    """Return the index identifier for an entry file (its name minus extension)."""
    return Path(path).stem
