"""Registry data models — tooth entries, alias entries and the index."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from reggen.spec import FORMAT_VERSION


class EntryKind(Enum):
    TOOTH = "tooth"  # Direct package descriptor
    ALIAS = "alias"  # Redirect to another package path


@dataclass(frozen=True)
class ToothEntry:
    """A single registrable package."""

    tooth: str
    author: str
    description: str
    name: str
    homepage: str = ""
    license: str = ""
    repository: str = ""
    tags: tuple[str, ...] = ()

    @property
    def kind(self) -> EntryKind:
        return EntryKind.TOOTH

    def to_dict(self) -> dict:
        return {
            "type": self.kind.value,
            "tooth": self.tooth,
            "author": self.author,
            "description": self.description,
            "name": self.name,
            "homepage": self.homepage,
            "license": self.license,
            "repository": self.repository,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class AliasEntry:
    """A redirect from one identifier to another package."""

    target: str

    @property
    def kind(self) -> EntryKind:
        return EntryKind.ALIAS

    def to_dict(self) -> dict:
        return {
            "type": self.kind.value,
            "target": self.target,
        }


Entry = Union[ToothEntry, AliasEntry]


@dataclass
class IndexDocument:
    """The compiled registry index."""

    index: dict[str, dict] = field(default_factory=dict)
    format_version: int = FORMAT_VERSION

    @property
    def identifiers(self) -> list[str]:
        return sorted(self.index)

    def to_dict(self) -> dict:
        return {
            "format_version": self.format_version,
            "index": self.index,
        }
