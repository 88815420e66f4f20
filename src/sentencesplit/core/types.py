"""Data types for non-breaking prefix tables."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


class PrefixKind(Enum):
    """How a non-breaking prefix suppresses a following boundary."""
    DEFAULT = "default"            # never break after the prefix
    NUMERIC_ONLY = "numeric_only"  # only hold when a numeral follows


@dataclass(frozen=True)
class PrefixEntry:
    """A single non-breaking prefix."""
    text: str                 # stored without trailing punctuation
    kind: PrefixKind = PrefixKind.DEFAULT


@dataclass(frozen=True)
class PrefixTable:
    """Immutable mapping from prefix text to kind, with provenance."""
    entries: Mapping[str, PrefixKind] = field(default_factory=dict)
    language: Optional[str] = None
    source: str = "empty"       # "bundled" | "file" | "empty"
    path: Optional[str] = None

    def __post_init__(self):
        # Freeze whatever mapping the loader handed over
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def lookup(self, token: str) -> Optional[PrefixKind]:
        """Return the kind registered for *token*, or None."""
        return self.entries.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PrefixEntry]:
        for text, kind in self.entries.items():
            yield PrefixEntry(text=text, kind=kind)

    def count(self, kind: PrefixKind) -> int:
        """Number of entries of the given kind."""
        return sum(1 for k in self.entries.values() if k is kind)
