"""
Tests for the dictionary contract and the indexed registry

Run with: pytest tests/test_dictionary.py -v
"""

import pytest

from dicomdict.dictionary import (
    ChainedDataDictionary,
    DataDictionary,
    DictionaryEntry,
    StubDataDictionary,
    TagByName,
)
from dicomdict.registry import DictionaryRegistry
from dicomdict.tags import Tag, TagRange
from dicomdict.vr import VR


def entry(group, element, alias, vr=VR.LO, factory=TagRange.single):
    return DictionaryEntry(factory(Tag(group, element)), alias, vr)


@pytest.fixture
def private_dictionary():
    return DictionaryRegistry([
        entry(0x0009, 0x1001, "FullFidelity"),
        entry(0x0009, 0x1002, "SuiteID", VR.SH),
        entry(0x6000, 0x3000, "OverlayData", VR.OB, TagRange.group100),
        entry(0x0020, 0x3100, "SourceImageIDs", VR.CS, TagRange.element100),
    ], description="GEMS private dictionary")


class TestDictionaryEntry:

    def test_immutable(self):
        e = entry(0x0010, 0x0010, "PatientName", VR.PN)
        with pytest.raises(AttributeError):
            e.alias = "Other"

    @pytest.mark.parametrize("alias", ["", "Patient Name", "Patient\tName"])
    def test_invalid_alias(self, alias):
        with pytest.raises(ValueError):
            entry(0x0010, 0x0010, alias)


class TestDictionaryRegistry:

    def test_lookups(self, private_dictionary):
        assert private_dictionary.by_name("SuiteID").tag == TagRange.single(Tag(0x0009, 0x1002))
        assert private_dictionary.by_tag(Tag(0x0009, 0x1001)).alias == "FullFidelity"
        assert private_dictionary.by_tag(Tag(0x6000, 0x3000)).alias == "OverlayData"

    def test_absent(self, private_dictionary):
        assert private_dictionary.by_name("PatientName") is None
        assert private_dictionary.by_tag(Tag(0x0010, 0x0010)) is None

    def test_by_tag_is_exact(self, private_dictionary):
        assert private_dictionary.by_tag(Tag(0x6002, 0x3000)) is None

    def test_search_tag_matches_ranges(self, private_dictionary):
        assert private_dictionary.search_tag(Tag(0x6002, 0x3000)).alias == "OverlayData"
        assert private_dictionary.search_tag(Tag(0x0020, 0x3142)).alias == "SourceImageIDs"
        assert private_dictionary.search_tag(Tag(0x0009, 0x1001)).alias == "FullFidelity"
        assert private_dictionary.search_tag(Tag(0x6100, 0x3000)) is None

    def test_last_write_wins(self):
        first = entry(0x0008, 0x0010, "RecognitionCode", VR.SH)
        same_tag = entry(0x0008, 0x0010, "LegacyRecognitionCode", VR.LO)
        same_alias = entry(0x0008, 0x0011, "RecognitionCode", VR.CS)
        registry = DictionaryRegistry([first, same_tag, same_alias])

        assert registry.by_tag(Tag(0x0008, 0x0010)) is same_tag
        assert registry.by_name("RecognitionCode") is same_alias
        assert registry.by_name("LegacyRecognitionCode") is same_tag

    def test_returns_same_entry_objects(self):
        e = entry(0x0010, 0x0020, "PatientID")
        registry = DictionaryRegistry([e])
        assert registry.by_name("PatientID") is e
        assert registry.by_tag(Tag(0x0010, 0x0020)) is e

    def test_read_only_indexes(self, private_dictionary):
        with pytest.raises(TypeError):
            private_dictionary.aliases["Other"] = None

    def test_container_protocol(self, private_dictionary):
        assert len(private_dictionary) == 4
        assert "SuiteID" in private_dictionary
        assert "PatientName" not in private_dictionary
        assert {e.alias for e in private_dictionary} == {
            "FullFidelity", "SuiteID", "OverlayData", "SourceImageIDs"
        }
        assert str(private_dictionary) == "GEMS private dictionary"

    def test_satisfies_protocol(self, private_dictionary):
        assert isinstance(private_dictionary, DataDictionary)


class TestStubAndChained:

    def test_stub_is_empty(self):
        stub = StubDataDictionary()
        assert stub.by_name("PatientName") is None
        assert stub.by_tag(Tag(0x0010, 0x0010)) is None
        assert isinstance(stub, DataDictionary)

    def test_chain_order(self, private_dictionary):
        override = DictionaryRegistry([entry(0x0009, 0x1002, "SuiteIdentifier", VR.LO)])
        chained = ChainedDataDictionary([StubDataDictionary(), override, private_dictionary])

        assert chained.by_tag(Tag(0x0009, 0x1002)).alias == "SuiteIdentifier"
        assert chained.by_name("SuiteID").tag.inner() == Tag(0x0009, 0x1002)
        assert chained.by_name("FullFidelity").vr is VR.LO
        assert chained.by_name("Nothing") is None
        assert chained.by_tag(Tag(0x0001, 0x0001)) is None

    def test_empty_chain(self):
        assert ChainedDataDictionary([]).by_name("PatientName") is None


class TestTagByName:

    def test_resolve(self, private_dictionary):
        assert TagByName(private_dictionary, "OverlayData").resolve() == Tag(0x6000, 0x3000)

    def test_unknown(self, private_dictionary):
        assert TagByName(private_dictionary, "Unknown").resolve() is None
