# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Dictionary artifact emitters

Turns raw PS3.6 records into either a generated Python entry table
(the format of ``dicomdict/entries.py``) or a JSON document keyed by
tag text.

Copyright 2025 DNAi inc.
"""

import json
import logging
import os
import re
from contextlib import contextmanager, suppress
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, TextIO, Tuple, Union

from dicomdict.dictionary import DictionaryEntry
from dicomdict.exceptions import DictionaryWriteError, TagRangeParseError
from dicomdict.extraction import RawRecord
from dicomdict.tags import RangeKind, TagRange
from dicomdict.vr import VR

logger = logging.getLogger(__name__)


RETIRED_MARKER = 'RET'
SEE_NOTE = 'See Note'

# Fully bracketed tag text, upper-case hex, at most the field suffix may be `xx`
TAG_PATTERN = re.compile(r'^\(([0-9A-F]{2}(?:[0-9A-F]{2}|xx)),([0-9A-F]{2}(?:[0-9A-F]{2}|xx))\)$')

CODE_FILE_HEADER = (
    "# Automatically generated. Edit at your own risk.\n"
    "\n"
    "from dicomdict.dictionary import DictionaryEntry as E\n"
    "from dicomdict.tags import Tag, TagRange\n"
    "from dicomdict.vr import VR\n"
    "\n"
    "ENTRIES = [\n"
)

_RANGE_CONSTRUCTORS = {
    RangeKind.SINGLE: 'single',
    RangeKind.GROUP100: 'group100',
    RangeKind.ELEMENT100: 'element100',
}


class OutputFormat(Enum):
    """Kind of artifact produced by the builder."""
    PY = "py"
    JSON = "json"

    @property
    def default_filename(self) -> str:
        return f"entries.{self.value}"


@dataclass(frozen=True)
class ClassifiedEntry:
    """A raw record accepted as a dictionary entry."""
    tag: TagRange
    alias: str
    vr: VR
    vr_annotation: Optional[str] = None
    obs: Optional[str] = None

    @property
    def retired(self) -> bool:
        return self.obs == RETIRED_MARKER

    def to_entry(self) -> DictionaryEntry:
        return DictionaryEntry(self.tag, self.alias, self.vr)

    def to_code_line(self) -> str:
        """
        Render this entry as one line of the generated entry table.

        Returns:
            Source line without the trailing newline
        """
        inner = self.tag.inner()
        line = (f'    E(TagRange.{_RANGE_CONSTRUCTORS[self.tag.kind]}'
                f'(Tag(0x{inner.group:04X}, 0x{inner.element:04X})), '
                f'"{self.alias}", VR.{self.vr.value}),')
        comments = [text for text in (self.vr_annotation, self.obs) if text]
        if comments:
            line += '  # ' + '; '.join(comments)
        return line


def normalize_vr(text: Optional[str]) -> Tuple[Optional[VR], Optional[str]]:
    """
    Split a VR cell into its primary VR and an annotation.

    ``"See Note"`` cells map to UN with the note as annotation; otherwise
    the first two characters are the VR code and the remainder, e.g.
    ``"or OW"``, is the annotation.

    Args:
        text: VR cell text

    Returns:
        Tuple of (VR or None if the code is unknown, annotation or None)
    """
    if not text:
        return VR.UN, None
    if text.startswith(SEE_NOTE):
        return VR.UN, text
    annotation = text[2:].strip() or None
    return VR.from_code(text[:2]), annotation


def classify_tag(text: str) -> Optional[TagRange]:
    """
    Classify the tag text of a PS3.6 row.

    Args:
        text: Tag text, e.g. "(0010,0010)", "(60xx,3000)" or "(0020,31xx)"

    Returns:
        TagRange, or None if the text is not a supported tag range
    """
    if not TAG_PATTERN.match(text):
        return None
    try:
        return TagRange.parse(text)
    except TagRangeParseError as e:
        logger.debug("Unsupported tag range %s: %s", text, e.message)
        return None


def classify_record(record: RawRecord, include_retired: bool = True) -> Optional[ClassifiedEntry]:
    """
    Turn a raw record into a dictionary entry.

    Rows without a valid keyword, unsupported tag patterns and unknown VRs
    are not attributes of interest and are dropped.

    Args:
        record: Raw record from the extraction pipeline
        include_retired: Whether to keep retired attributes

    Returns:
        ClassifiedEntry, or None if the record is dropped
    """
    if not record.alias:
        return None
    if record.obs == RETIRED_MARKER and not include_retired:
        return None

    tag_range = classify_tag(record.tag)
    if tag_range is None:
        logger.debug("Skipping %s (%s): unsupported tag pattern", record.tag, record.alias)
        return None

    vr, annotation = normalize_vr(record.vr)
    if vr is None:
        logger.debug("Skipping %s (%s): unknown VR %r", record.tag, record.alias, record.vr)
        return None

    # Keywords end up as string literals in the generated table
    if not record.alias.isidentifier():
        logger.debug("Skipping %s: invalid keyword %r", record.tag, record.alias)
        return None

    return ClassifiedEntry(tag_range, record.alias, vr, annotation, record.obs)


def classify_records(records: Iterable[RawRecord], include_retired: bool = True) -> Iterable[ClassifiedEntry]:
    """Lazily classify records, in input order, dropping rejected ones."""
    for record in records:
        entry = classify_record(record, include_retired)
        if entry is not None:
            yield entry


def _prepare_destination(dest_path: Union[str, Path]) -> Path:
    dest_path = Path(dest_path)
    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DictionaryWriteError(f"Cannot create directory {dest_path.parent}: {e}") from e
    return dest_path


@contextmanager
def _replacing(dest_path: Path) -> Iterator[TextIO]:
    """
    Open a sibling temporary file that replaces dest_path once the block completes.

    If the block raises, the temporary file is removed and dest_path is left untouched.
    """
    partial_path = dest_path.with_name(f".{dest_path.name}.partial")
    replaced = False
    try:
        with open(partial_path, 'w', encoding='utf-8') as f:
            yield f
        os.replace(partial_path, dest_path)
        replaced = True
    except OSError as e:
        raise DictionaryWriteError(f"Failed to write {dest_path}: {e}") from e
    finally:
        if not replaced:
            with suppress(FileNotFoundError):
                partial_path.unlink()


def write_code_file(dest_path: Union[str, Path], records: Iterable[RawRecord],
                    include_retired: bool = True) -> int:
    """
    Write the generated Python entry table.

    Args:
        dest_path: Path of the module to write
        records: Raw records, in table order
        include_retired: Whether to keep retired attributes

    Returns:
        Number of entries written

    Raises:
        DictionaryWriteError: If the file cannot be written
        DictionaryReadError: If the records cannot be read; an existing file is kept
    """
    dest_path = _prepare_destination(dest_path)
    count = 0
    with _replacing(dest_path) as f:
        f.write(CODE_FILE_HEADER)
        for entry in classify_records(records, include_retired):
            f.write(entry.to_code_line() + '\n')
            count += 1
        f.write(']\n')
    logger.info("Wrote %d entries to %s", count, dest_path)
    return count


def record_to_json(record: RawRecord) -> Dict[str, Optional[str]]:
    """JSON object of a raw record; ``obs`` is left out when absent."""
    data = {
        'tag': record.tag,
        'name': record.name,
        'alias': record.alias,
        'vr': record.vr,
        'vm': record.vm,
    }
    if record.obs is not None:
        data['obs'] = record.obs
    return data


def write_json_file(dest_path: Union[str, Path], records: Iterable[RawRecord],
                    include_retired: bool = True) -> int:
    """
    Write the raw records as a JSON object keyed by tag text.

    Keys are sorted; a record overwrites an earlier one with the same tag text.

    Args:
        dest_path: Path of the JSON file to write
        records: Raw records
        include_retired: Whether to keep retired attributes

    Returns:
        Number of distinct keys written

    Raises:
        DictionaryWriteError: If the file cannot be written
    """
    dest_path = _prepare_destination(dest_path)
    entries: Dict[str, Dict[str, Optional[str]]] = {}
    for record in records:
        if record.obs == RETIRED_MARKER and not include_retired:
            continue
        entries[record.tag] = record_to_json(record)

    with _replacing(dest_path) as f:
        json.dump(dict(sorted(entries.items())), f, ensure_ascii=False)
    logger.info("Wrote %d entries to %s", len(entries), dest_path)
    return len(entries)


def write_artifact(dest_path: Union[str, Path], records: Iterable[RawRecord],
                   output_format: OutputFormat, include_retired: bool = True) -> int:
    """Write records in the given output format."""
    if output_format is OutputFormat.JSON:
        return write_json_file(dest_path, records, include_retired)
    return write_code_file(dest_path, records, include_retired)
