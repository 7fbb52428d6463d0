# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
DICOM tag and tag range model

A DICOM attribute is identified by a (group, element) pair of 16-bit
numbers. The data dictionary occasionally registers a whole family of
tags for one attribute instead, by leaving the two rightmost digits of
the group or of the element open, e.g. Overlay Data is ``(60xx,3000)``.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from enum import Enum

from dicomdict.exceptions import TagRangeParseError


WILDCARD = 'xx'


@dataclass(frozen=True, order=True)
class Tag:
    """A DICOM attribute tag, ordered by group then element."""
    group: int
    element: int

    def __post_init__(self):
        for field_name in ('group', 'element'):
            value = getattr(self, field_name)
            if not isinstance(value, int) or not 0 <= value <= 0xFFFF:
                raise ValueError(f"Tag {field_name} must be a 16-bit unsigned integer, got {value!r}")

    def __str__(self) -> str:
        return f"({self.group:04X},{self.element:04X})"


class RangeKind(Enum):
    """Shape of a tag range."""
    SINGLE = "single"
    GROUP100 = "group100"  # (GGxx,EEEE)
    ELEMENT100 = "element100"  # (GGGG,EExx)


@dataclass(frozen=True)
class TagRange:
    """
    Specification of the tag or tags pertaining to an attribute.

    Very often the dictionary indicates a unique ``(group,element)`` for
    an attribute, but occasionally a range of 256 groups or 256 elements
    is indicated instead. The open digits of a wildcard range are kept as
    zero in the inner tag.
    """
    kind: RangeKind
    tag: Tag

    def __post_init__(self):
        if self.kind is RangeKind.GROUP100 and self.tag.group & 0xFF:
            object.__setattr__(self, 'tag', Tag(self.tag.group & 0xFF00, self.tag.element))
        elif self.kind is RangeKind.ELEMENT100 and self.tag.element & 0xFF:
            object.__setattr__(self, 'tag', Tag(self.tag.group, self.tag.element & 0xFF00))

    @classmethod
    def single(cls, tag: Tag) -> 'TagRange':
        return cls(RangeKind.SINGLE, tag)

    @classmethod
    def group100(cls, tag: Tag) -> 'TagRange':
        return cls(RangeKind.GROUP100, tag)

    @classmethod
    def element100(cls, tag: Tag) -> 'TagRange':
        return cls(RangeKind.ELEMENT100, tag)

    def inner(self) -> Tag:
        """Retrieve the tag wrapped by this range."""
        return self.tag

    def contains(self, tag: Tag) -> bool:
        """
        Check whether this range contains the given tag.

        Args:
            tag: Tag to test

        Returns:
            True if the tag belongs to this range
        """
        inner = self.tag
        if self.kind is RangeKind.SINGLE:
            return inner == tag
        if self.kind is RangeKind.GROUP100:
            return inner.group >> 8 == tag.group >> 8 and inner.element == tag.element
        return inner.group == tag.group and inner.element >> 8 == tag.element >> 8

    def __contains__(self, tag: Tag) -> bool:
        return self.contains(tag)

    @classmethod
    def parse(cls, text: str) -> 'TagRange':
        """
        Parse a tag range from text.

        Accepted forms are ``(GGGG,EEEE)`` and ``GGGG,EEEE``, where the last
        two characters of at most one of the fields may be ``xx``.

        Args:
            text: Tag range text, e.g. ``"(0010,0010)"`` or ``"60xx,3000"``

        Returns:
            Parsed TagRange

        Raises:
            TagRangeParseError: If the text is not a supported tag range
        """
        if text.startswith('(') and text.endswith(')'):
            text = text[1:-1]

        parts = text.split(',')
        if len(parts) != 2:
            raise TagRangeParseError(
                "Invalid number of tag components, expected `group,element`",
                reason='component_count',
            )
        group, element = parts
        if len(group) != 4:
            raise TagRangeParseError(
                "Tag component `group` has an invalid length, must be 4",
                reason='group_length',
            )
        if len(element) != 4:
            raise TagRangeParseError(
                "Tag component `element` has an invalid length, must be 4",
                reason='element_length',
            )

        group_open = group[2:] == WILDCARD
        element_open = element[2:] == WILDCARD
        if group_open and element_open:
            raise TagRangeParseError("Unsupported tag range", reason='unsupported_range')

        group_value = _parse_hex(group[:2] if group_open else group, 'group')
        element_value = _parse_hex(element[:2] if element_open else element, 'element')

        if group_open:
            return cls.group100(Tag(group_value << 8, element_value))
        if element_open:
            return cls.element100(Tag(group_value, element_value << 8))
        return cls.single(Tag(group_value, element_value))

    def format(self) -> str:
        """Render this range in ``(GGGG,EEEE)`` notation, with ``xx`` for open digits."""
        group = f"{self.tag.group:04X}"
        element = f"{self.tag.element:04X}"
        if self.kind is RangeKind.GROUP100:
            group = group[:2] + WILDCARD
        elif self.kind is RangeKind.ELEMENT100:
            element = element[:2] + WILDCARD
        return f"({group},{element})"

    def __str__(self) -> str:
        return self.format()


_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def _parse_hex(digits: str, component: str) -> int:
    # Hex digits only: no sign, underscore or whitespace
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise TagRangeParseError(
            f"Invalid component `{component}`",
            reason=f'invalid_{component}',
        )
    return int(digits, 16)
