# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
DICOMDict - DICOM attribute data dictionary

Maps DICOM attribute tags to their keyword and typical value
representation, and builds that mapping from the DICOM standard
(PS3.6, Registry of DICOM Data Elements).

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from dicomdict.tags import Tag, TagRange, RangeKind
from dicomdict.vr import VR
from dicomdict.dictionary import (
    DataDictionary,
    DictionaryEntry,
    StubDataDictionary,
    ChainedDataDictionary,
    TagByName,
)
from dicomdict.registry import DictionaryRegistry
from dicomdict.standard import StandardDataDictionary, registry
from dicomdict.exceptions import (
    DICOMDictError,
    TagRangeParseError,
    DictionaryReadError,
    DictionaryWriteError,
)

__all__ = [
    "Tag",
    "TagRange",
    "RangeKind",
    "VR",
    "DataDictionary",
    "DictionaryEntry",
    "StubDataDictionary",
    "ChainedDataDictionary",
    "TagByName",
    "DictionaryRegistry",
    "StandardDataDictionary",
    "registry",
    "DICOMDictError",
    "TagRangeParseError",
    "DictionaryReadError",
    "DictionaryWriteError",
]
