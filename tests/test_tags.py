"""
Tests for the tag and tag range model

Run with: pytest tests/test_tags.py -v
"""

import pytest

from dicomdict.exceptions import TagRangeParseError
from dicomdict.tags import RangeKind, Tag, TagRange


SAMPLE_TAGS = [
    Tag(0x0000, 0x0000),
    Tag(0x0008, 0x0016),
    Tag(0x0010, 0x0010),
    Tag(0x6000, 0x3000),
    Tag(0x60FF, 0x3000),
    Tag(0x6100, 0x3000),
    Tag(0x7FE0, 0x0010),
    Tag(0xFFFE, 0xE000),
    Tag(0xFFFF, 0xFFFF),
]


class TestTag:

    def test_equality_and_hash(self):
        assert Tag(0x0010, 0x0010) == Tag(0x0010, 0x0010)
        assert len({Tag(0x0010, 0x0010), Tag(0x0010, 0x0010), Tag(0x0010, 0x0020)}) == 2

    def test_ordering(self):
        assert Tag(0x0008, 0xFFFF) < Tag(0x0010, 0x0000)
        assert Tag(0x0010, 0x0010) < Tag(0x0010, 0x0020)
        assert sorted([Tag(0x7FE0, 0x0010), Tag(0x0002, 0x0010)])[0] == Tag(0x0002, 0x0010)

    def test_str(self):
        assert str(Tag(0x7FE0, 0x0010)) == "(7FE0,0010)"

    @pytest.mark.parametrize("group,element", [(-1, 0), (0x10000, 0), (0, 0x10000), ("10", 0)])
    def test_out_of_range(self, group, element):
        with pytest.raises(ValueError):
            Tag(group, element)


class TestContains:

    @pytest.mark.parametrize("tag", SAMPLE_TAGS)
    def test_single_contains_only_itself(self, tag):
        tag_range = TagRange.single(tag)
        assert tag_range.contains(tag)
        for other in SAMPLE_TAGS:
            if other != tag:
                assert not tag_range.contains(other)

    def test_group100_ignores_group_low_byte(self):
        tag_range = TagRange.group100(Tag(0x6000, 0x3000))
        for group in range(0x10000):
            expected = group >> 8 == 0x60
            assert tag_range.contains(Tag(group, 0x3000)) == expected

    def test_group100_requires_exact_element(self):
        tag_range = TagRange.group100(Tag(0x6000, 0x3000))
        assert not tag_range.contains(Tag(0x6002, 0x3001))
        assert not tag_range.contains(Tag(0x6002, 0x0010))

    def test_element100(self):
        tag_range = TagRange.element100(Tag(0x0020, 0x3100))
        assert tag_range.contains(Tag(0x0020, 0x3100))
        assert tag_range.contains(Tag(0x0020, 0x31FF))
        assert not tag_range.contains(Tag(0x0020, 0x3200))
        assert not tag_range.contains(Tag(0x0021, 0x3100))

    def test_in_operator(self):
        assert Tag(0x6002, 0x3000) in TagRange.group100(Tag(0x6000, 0x3000))

    def test_inner(self):
        assert TagRange.element100(Tag(0x0020, 0x3100)).inner() == Tag(0x0020, 0x3100)

    def test_open_digits_are_cleared(self):
        assert TagRange.group100(Tag(0x6002, 0x3000)) == TagRange.group100(Tag(0x6000, 0x3000))
        assert TagRange.element100(Tag(0x0020, 0x3105)).inner() == Tag(0x0020, 0x3100)


class TestParse:

    def test_examples(self):
        assert TagRange.parse("(1234,5678)") == TagRange.single(Tag(0x1234, 0x5678))
        assert TagRange.parse("1234,5678") == TagRange.single(Tag(0x1234, 0x5678))
        assert TagRange.parse("12xx,5678") == TagRange.group100(Tag(0x1200, 0x5678))
        assert TagRange.parse("1234,56xx") == TagRange.element100(Tag(0x1234, 0x5600))

    def test_kinds(self):
        assert TagRange.parse("(60xx,3000)").kind is RangeKind.GROUP100
        assert TagRange.parse("(0020,31xx)").kind is RangeKind.ELEMENT100
        assert TagRange.parse("(7FE0,0010)").kind is RangeKind.SINGLE

    def test_lower_case_hex(self):
        assert TagRange.parse("(7fe0,0010)") == TagRange.single(Tag(0x7FE0, 0x0010))

    @pytest.mark.parametrize("text,reason", [
        ("(12,5678)", "group_length"),
        ("1234,567", "element_length"),
        ("(1234,5678", "group_length"),
        ("12G4,5678", "invalid_group"),
        ("1234,56Z8", "invalid_element"),
        ("1x34,5678", "invalid_group"),
        ("+123,5678", "invalid_group"),
        ("12xx,56xx", "unsupported_range"),
        ("(12345678)", "component_count"),
        ("1234,5678,9ABC", "component_count"),
        ("", "component_count"),
    ])
    def test_errors(self, text, reason):
        with pytest.raises(TagRangeParseError) as excinfo:
            TagRange.parse(text)
        assert excinfo.value.reason == reason
        assert excinfo.value.message

    def test_error_messages_are_distinct(self):
        messages = set()
        for text in ("12,5678", "12G4,5678", "12xx,56xx", "12345678"):
            with pytest.raises(TagRangeParseError) as excinfo:
                TagRange.parse(text)
            messages.add(excinfo.value.message)
        assert len(messages) == 4

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            TagRange.parse("12xx,56xx")


class TestFormat:

    def test_format(self):
        assert TagRange.single(Tag(0x0010, 0x0010)).format() == "(0010,0010)"
        assert TagRange.group100(Tag(0x6000, 0x3000)).format() == "(60xx,3000)"
        assert str(TagRange.element100(Tag(0x0020, 0x3100))) == "(0020,31xx)"

    @pytest.mark.parametrize("tag", SAMPLE_TAGS)
    def test_round_trip(self, tag):
        for factory in (TagRange.single, TagRange.group100, TagRange.element100):
            tag_range = factory(tag)
            assert TagRange.parse(tag_range.format()) == tag_range
