# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Indexed attribute dictionary

Builds the alias and tag indexes of a data dictionary once, from an
ordered list of entries. Later entries take precedence over earlier ones
sharing the same alias or tag.

Copyright 2025 DNAi inc.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from dicomdict.dictionary import DictionaryEntry
from dicomdict.tags import RangeKind, Tag


class DictionaryRegistry:
    """
    Read-only data dictionary indexed by alias and by tag.

    Lookups are plain hash map accesses; entries are never copied.
    """

    def __init__(self, entries: Iterable[DictionaryEntry], description: str = "DICOM Data Dictionary"):
        """
        Index the given entries.

        Args:
            entries: Ordered dictionary entries; the last one wins on a shared key
            description: Human-readable name of this dictionary
        """
        by_name: Dict[str, DictionaryEntry] = {}
        by_tag: Dict[Tag, DictionaryEntry] = {}
        for entry in entries:
            by_name[entry.alias] = entry
            by_tag[entry.tag.inner()] = entry

        self.description = description
        self._by_name: Mapping[str, DictionaryEntry] = MappingProxyType(by_name)
        self._by_tag: Mapping[Tag, DictionaryEntry] = MappingProxyType(by_tag)
        # Wildcard entries in table order, for search_tag
        self._ranges: List[DictionaryEntry] = [
            entry for entry in by_tag.values() if entry.tag.kind is not RangeKind.SINGLE
        ]

    def by_name(self, name: str) -> Optional[DictionaryEntry]:
        """Fetch an entry by its alias."""
        return self._by_name.get(name)

    def by_tag(self, tag: Tag) -> Optional[DictionaryEntry]:
        """Fetch an entry by its exact tag (the inner tag of its range)."""
        return self._by_tag.get(tag)

    def search_tag(self, tag: Tag) -> Optional[DictionaryEntry]:
        """
        Fetch the entry whose tag range contains the given tag.

        An exact match is preferred; otherwise wildcard ranges are tested
        in table order, so ``(6002,3000)`` resolves to Overlay Data.

        Args:
            tag: Tag to resolve

        Returns:
            Matching entry or None
        """
        entry = self._by_tag.get(tag)
        if entry is not None:
            return entry
        for candidate in self._ranges:
            if candidate.tag.contains(tag):
                return candidate
        return None

    @property
    def aliases(self) -> Mapping[str, DictionaryEntry]:
        return self._by_name

    @property
    def tags(self) -> Mapping[Tag, DictionaryEntry]:
        return self._by_tag

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._by_tag.values())

    def __len__(self) -> int:
        return len(self._by_tag)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"<DictionaryRegistry {self.description!r}: {len(self)} entries>"
