# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Standard DICOM data dictionary

The standard dictionary is a process-wide singleton containing the
attributes registered in DICOM PS3.6, built on first use from the
generated entry table plus the File Meta Information attributes.

When not using private tags, this dictionary should suffice.

Copyright 2025 DNAi inc.
"""

import logging
import threading
from typing import List, Optional

from dicomdict.dictionary import DictionaryEntry as E
from dicomdict.entries import ENTRIES
from dicomdict.registry import DictionaryRegistry
from dicomdict.tags import Tag, TagRange
from dicomdict.vr import VR

logger = logging.getLogger(__name__)


# File Meta Information (PS3.10), appended after the generated table
META_ENTRIES: List[E] = [
    E(TagRange.single(Tag(0x0002, 0x0000)), "FileMetaInformationGroupLength", VR.UL),
    E(TagRange.single(Tag(0x0002, 0x0001)), "FileMetaInformationVersion", VR.OB),
    E(TagRange.single(Tag(0x0002, 0x0002)), "MediaStorageSOPClassUID", VR.UI),
    E(TagRange.single(Tag(0x0002, 0x0003)), "MediaStorageSOPInstanceUID", VR.UI),
    E(TagRange.single(Tag(0x0002, 0x0010)), "TransferSyntaxUID", VR.UI),
    E(TagRange.single(Tag(0x0002, 0x0012)), "ImplementationClassUID", VR.UI),
    E(TagRange.single(Tag(0x0002, 0x0013)), "ImplementationVersionName", VR.SH),
    E(TagRange.single(Tag(0x0002, 0x0016)), "SourceApplicationEntityTitle", VR.AE),
    E(TagRange.single(Tag(0x0002, 0x0017)), "SendingApplicationEntityTitle", VR.AE),
    E(TagRange.single(Tag(0x0002, 0x0018)), "ReceivingApplicationEntityTitle", VR.AE),
    E(TagRange.single(Tag(0x0002, 0x0100)), "PrivateInformationCreatorUID", VR.UI),
    E(TagRange.single(Tag(0x0002, 0x0102)), "PrivateInformation", VR.OB),
]

_registry: Optional[DictionaryRegistry] = None
_registry_lock = threading.Lock()


def _build_registry() -> DictionaryRegistry:
    registry = DictionaryRegistry(
        list(ENTRIES) + META_ENTRIES,
        description="Standard DICOM Data Dictionary",
    )
    logger.debug("Standard dictionary indexed: %d tags, %d aliases",
                 len(registry.tags), len(registry.aliases))
    return registry


def registry() -> DictionaryRegistry:
    """
    Retrieve the singleton instance of the standard dictionary registry.

    The registry is built exactly once, by the first caller; concurrent
    callers wait for the construction to complete.

    Returns:
        The standard DictionaryRegistry
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = _build_registry()
    return _registry


class StandardDataDictionary:
    """A data dictionary which consults the global standard attribute registry."""

    def by_name(self, name: str) -> Optional[E]:
        return registry().by_name(name)

    def by_tag(self, tag: Tag) -> Optional[E]:
        return registry().by_tag(tag)

    def search_tag(self, tag: Tag) -> Optional[E]:
        return registry().search_tag(tag)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StandardDataDictionary)

    def __hash__(self) -> int:
        return hash(StandardDataDictionary)

    def __str__(self) -> str:
        return "Standard DICOM Data Dictionary"
