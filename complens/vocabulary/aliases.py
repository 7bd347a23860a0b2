"""Alias dictionary: canonical UI component name -> lowercase aliases, loaded from JSON."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from complens.utils.config import KEYWORDS_PATH

_log = logging.getLogger("complens.vocabulary")


@dataclass(frozen=True)
class AliasEntry:
    name: str
    aliases: Tuple[str, ...] = ()

    @property
    def longest_alias(self) -> int:
        """Length of the longest alias; -1 when the entry has none (sorts last)."""
        return max((len(a) for a in self.aliases), default=-1)


def _entries_from_mapping(mapping: dict) -> List[AliasEntry]:
    entries = []
    for name, aliases in mapping.items():
        if not isinstance(name, str) or not isinstance(aliases, list):
            raise ValueError(f"invalid alias entry for {name!r}")
        lowered = (a.lower() for a in aliases if isinstance(a, str))
        entries.append(AliasEntry(name=name, aliases=tuple(dict.fromkeys(lowered))))
    return entries


def load_entries(path: Optional[Union[str, Path]] = None) -> List[AliasEntry]:
    """
    Read the alias JSON ({canonical: [alias, ...]}) in file key order.
    A missing or malformed file yields [] and a warning; nothing is raised.
    """
    path = Path(path) if path is not None else KEYWORDS_PATH
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
        if not isinstance(data, dict):
            raise ValueError("alias config must be a JSON object")
        return _entries_from_mapping(data)
    except (OSError, ValueError) as e:
        _log.warning("Failed to load component keywords from %s: %s", path, e)
        return []


class AliasDictionary:
    """
    Read-only view over alias entries. Iteration order is the insertion order of
    the source mapping (JSON key order); "first match" rules depend on it.
    """

    def __init__(self, entries: Iterable[AliasEntry] = ()):
        seen = set()
        kept = []
        for entry in entries:
            if entry.name in seen:
                _log.warning("Duplicate canonical component %r ignored", entry.name)
                continue
            seen.add(entry.name)
            kept.append(entry)
        self._entries = tuple(kept)
        self._by_longest_alias = tuple(sorted(self._entries, key=lambda e: -e.longest_alias))
        names: List[str] = []
        for entry in self._entries:
            names.append(entry.name)
            names.extend(entry.aliases)
        self._all_names = tuple(names)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "AliasDictionary":
        return cls(load_entries(path))

    @classmethod
    def from_mapping(cls, mapping: Dict[str, List[str]]) -> "AliasDictionary":
        return cls(_entries_from_mapping(mapping))

    def __iter__(self) -> Iterator[AliasEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[AliasEntry, ...]:
        return self._entries

    def all_names(self) -> Tuple[str, ...]:
        """Canonical names and aliases, entry by entry, canonical first."""
        return self._all_names

    def by_longest_alias(self) -> Tuple[AliasEntry, ...]:
        """Entries ordered by longest alias, descending; ties keep dictionary order."""
        return self._by_longest_alias

    def canonical_name_of(self, raw_name: str) -> str:
        """Resolve any alias (case-insensitive) to its canonical name; unknown names come back lowercased."""
        lower = raw_name.lower()
        for entry in self._entries:
            if entry.name.lower() == lower or lower in entry.aliases:
                return entry.name
        return lower

    def to_mapping(self) -> Dict[str, List[str]]:
        return {e.name: list(e.aliases) for e in self._entries}
