# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
PS3.6 data element table extraction

Reads the DocBook XML edition of DICOM PS3.6 and yields one raw record
per row of the Registry of DICOM Data Elements (table 6-1).

The document is consumed as a stream of parser events. No document tree
is kept: the reader only tracks its position in the target table and
the text of the cells of the current row, and discards every element
once it is closed.

Copyright 2025 DNAi inc.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from dicomdict.exceptions import DictionaryReadError

logger = logging.getLogger(__name__)


DEFAULT_TABLE_ID = 'table_6-1'
DEFAULT_CHUNK_SIZE = 64 * 1024

XML_ID = '{http://www.w3.org/XML/1998/namespace}id'
ZERO_WIDTH_SPACE = '\u200b'

Source = Union[BinaryIO, Iterable[bytes]]


@dataclass
class RawRecord:
    """
    One row of the data element table, before classification.

    Attributes:
        tag: Tag text as written in the table, e.g. "(0010,0010)" or "(60xx,3000)"
        name: Attribute name
        alias: Attribute keyword
        vr: Value representation text, e.g. "US", "OB or OW", "See Note"
        vm: Value multiplicity text
        obs: Notes column, "RET" for retired attributes
    """
    tag: str
    name: Optional[str] = None
    alias: Optional[str] = None
    vr: Optional[str] = None
    vm: Optional[str] = None
    obs: Optional[str] = None


class ReadingState(Enum):
    """Position of the reader in the document."""
    OFF = 0
    IN_TABLE_HEAD = 1
    IN_TABLE = 2
    IN_CELL_TAG = 3
    IN_CELL_NAME = 4
    IN_CELL_KEYWORD = 5
    IN_CELL_VR = 6
    IN_CELL_VM = 7
    IN_CELL_OBS = 8
    IN_CELL_UNKNOWN = 9


# A cell paragraph opening in a state moves the reader to the next column
_NEXT_CELL = {
    ReadingState.IN_TABLE: ReadingState.IN_CELL_TAG,
    ReadingState.IN_CELL_TAG: ReadingState.IN_CELL_NAME,
    ReadingState.IN_CELL_NAME: ReadingState.IN_CELL_KEYWORD,
    ReadingState.IN_CELL_KEYWORD: ReadingState.IN_CELL_VR,
    ReadingState.IN_CELL_VR: ReadingState.IN_CELL_VM,
    ReadingState.IN_CELL_VM: ReadingState.IN_CELL_OBS,
    ReadingState.IN_CELL_OBS: ReadingState.IN_CELL_UNKNOWN,
}

# Record field captured by each cell state
_CELL_FIELDS = {
    ReadingState.IN_CELL_TAG: 'tag',
    ReadingState.IN_CELL_NAME: 'name',
    ReadingState.IN_CELL_KEYWORD: 'alias',
    ReadingState.IN_CELL_VR: 'vr',
    ReadingState.IN_CELL_VM: 'vm',
    ReadingState.IN_CELL_OBS: 'obs',
}


def _local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag name."""
    return tag.rsplit('}', 1)[-1] if '}' in tag else tag


def _cell_text(element: ET.Element) -> Optional[str]:
    text = ' '.join(''.join(element.itertext()).replace(ZERO_WIDTH_SPACE, '').split())
    return text or None


def iter_chunks(source: Source, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield byte chunks from a binary file-like object or pass an iterable of chunks through."""
    if hasattr(source, 'read'):
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                return
            yield chunk
    else:
        yield from source


class XmlEntryIterator:
    """
    Iterator of raw records from a PS3.6 XML document.

    The iterator is single-pass: once consumed, iterate again by creating
    a new one over a fresh stream.

    Example:
        >>> with open('part06.xml', 'rb') as f:
        ...     for record in XmlEntryIterator(f):
        ...         print(record.tag, record.alias)
    """

    def __init__(self, source: Source, table_id: str = DEFAULT_TABLE_ID,
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Initialize the reader.

        Args:
            source: Binary file-like object, or an iterable of byte chunks
            table_id: Identifier (xml:id) of the table to read
            chunk_size: Number of bytes read at a time from a file-like source
        """
        self.table_id = table_id
        self.state = ReadingState.OFF
        self.depth = 0
        self._chunks = iter_chunks(source, chunk_size)
        self._parser = ET.XMLPullParser(events=('start', 'end'))
        self._pending = iter(())
        self._eof = False
        self._done = False
        self._row = {}
        self._rows_seen = 0

    def __iter__(self) -> 'XmlEntryIterator':
        return self

    def __next__(self) -> RawRecord:
        while True:
            if not self._done:
                try:
                    for event, element in self._pending:
                        record = self._handle(event, element)
                        if record is not None:
                            return record
                        if self._done:
                            break
                except ET.ParseError as e:
                    # Syntax errors are queued by the parser and raised in event order
                    self._done = True
                    raise DictionaryReadError(f"Malformed XML document: {e}") from e
            if self._done or self._eof:
                self._done = True
                self._close()
                raise StopIteration
            self._pending = self._read_events()

    def _read_events(self) -> Iterator:
        try:
            try:
                chunk = next(self._chunks)
            except StopIteration:
                self._eof = True
                # Events still buffered by the parser are delivered after close
                self._parser.close()
                logger.debug("End of document reached after %d table rows", self._rows_seen)
            else:
                self._parser.feed(chunk)
            return self._parser.read_events()
        except ET.ParseError as e:
            self._done = True
            raise DictionaryReadError(f"Malformed XML document: {e}") from e
        except OSError as e:
            self._done = True
            raise DictionaryReadError(f"Failed to read XML document: {e}") from e

    def _close(self):
        close = getattr(self._chunks, 'close', None)
        if close is not None:
            close()

    def _handle(self, event: str, element: ET.Element) -> Optional[RawRecord]:
        name = _local_name(element.tag)

        if event == 'start':
            self.depth += 1
            if self.state is ReadingState.OFF:
                if name == 'table' and self.table_id in (element.get(XML_ID), element.get('id')):
                    logger.debug("Entered table %s at depth %d", self.table_id, self.depth)
                    self.state = ReadingState.IN_TABLE_HEAD
            elif self.state is ReadingState.IN_TABLE_HEAD:
                if name == 'tbody':
                    self.state = ReadingState.IN_TABLE
            elif name == 'para' and self.state in _NEXT_CELL:
                self.state = _NEXT_CELL[self.state]
            return None

        # end event
        self.depth -= 1
        if self.state is ReadingState.OFF:
            # Nothing outside the target table is needed
            element.clear()
            return None
        if self.state is ReadingState.IN_TABLE_HEAD:
            return None

        if name == 'para':
            field = _CELL_FIELDS.get(self.state)
            if field is not None:
                self._row[field] = _cell_text(element)
            return None
        if name == 'tr':
            self._rows_seen += 1
            row, self._row = self._row, {}
            self.state = ReadingState.IN_TABLE
            element.clear()
            if row.get('tag') is None:
                return None
            return RawRecord(**row)
        if name == 'tbody':
            logger.debug("Table %s ended after %d rows", self.table_id, self._rows_seen)
            self._done = True
        return None


def iter_raw_records(source: Source, table_id: str = DEFAULT_TABLE_ID,
                     chunk_size: int = DEFAULT_CHUNK_SIZE) -> XmlEntryIterator:
    """
    Read the raw records of a data element table.

    Args:
        source: Binary file-like object, or an iterable of byte chunks
        table_id: Identifier (xml:id) of the table to read
        chunk_size: Number of bytes read at a time from a file-like source

    Returns:
        Lazy, single-pass iterator of RawRecord
    """
    return XmlEntryIterator(source, table_id=table_id, chunk_size=chunk_size)
