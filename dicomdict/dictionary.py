# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
DICOM data dictionary contract

A data dictionary converts a tag to an alias and vice versa, and tells
the typical value representation of the attribute. Any object with
``by_name`` and ``by_tag`` lookups is a dictionary: the standard
dictionary, a private dictionary built from vendor entries, or a chain
of dictionaries consulted in order.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple, runtime_checkable

from dicomdict.tags import Tag, TagRange
from dicomdict.vr import VR


@dataclass(frozen=True)
class DictionaryEntry:
    """
    A DICOM attribute as registered in a data dictionary.

    Attributes:
        tag: The attribute tag or tag range
        alias: The keyword of the attribute, with no spaces, usually UpperCamelCase
        vr: The typical value representation; an element may occasionally have another
    """
    tag: TagRange
    alias: str
    vr: VR

    def __post_init__(self):
        if not self.alias or any(c.isspace() for c in self.alias):
            raise ValueError(f"Invalid attribute alias: {self.alias!r}")


@runtime_checkable
class DataDictionary(Protocol):
    """Lookup capability shared by all attribute dictionaries."""

    def by_name(self, name: str) -> Optional[DictionaryEntry]:
        """Fetch an entry by its alias (e.g. "PatientName"); case sensitive."""
        ...

    def by_tag(self, tag: Tag) -> Optional[DictionaryEntry]:
        """Fetch an entry by its tag."""
        ...


class StubDataDictionary:
    """A data dictionary which contains no attributes."""

    def by_name(self, name: str) -> Optional[DictionaryEntry]:
        return None

    def by_tag(self, tag: Tag) -> Optional[DictionaryEntry]:
        return None

    def __str__(self) -> str:
        return "Empty DICOM Data Dictionary"


class ChainedDataDictionary:
    """
    Composite data dictionary.

    Each lookup consults the given dictionaries in order and returns the
    first entry found. Typically a private dictionary is placed before
    the standard one.
    """

    def __init__(self, dictionaries: Iterable[DataDictionary]):
        self.dictionaries: Tuple[DataDictionary, ...] = tuple(dictionaries)

    def by_name(self, name: str) -> Optional[DictionaryEntry]:
        for dictionary in self.dictionaries:
            entry = dictionary.by_name(name)
            if entry is not None:
                return entry
        return None

    def by_tag(self, tag: Tag) -> Optional[DictionaryEntry]:
        for dictionary in self.dictionaries:
            entry = dictionary.by_tag(tag)
            if entry is not None:
                return entry
        return None


class TagByName:
    """
    Resolves an attribute alias to its tag at a later time.

    Example:
        >>> TagByName(StandardDataDictionary(), "PatientName").resolve()
        Tag(group=16, element=16)
    """

    def __init__(self, dictionary: DataDictionary, name: str):
        self.dictionary = dictionary
        self.name = name

    def resolve(self) -> Optional[Tag]:
        """
        Look up the alias in the dictionary.

        Returns:
            The inner tag of the matching entry, or None if the alias is unknown
        """
        entry = self.dictionary.by_name(self.name)
        if entry is None:
            return None
        return entry.tag.inner()
