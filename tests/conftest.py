"""
Shared fixtures: synthetic PS3.6 DocBook documents
"""

from typing import Iterable, Optional, Sequence

import pytest


HEADER_ROW = ("Tag", "Name", "Keyword", "VR", "VM", "")


def _cell(text: Optional[str], emphasis: bool = False) -> str:
    if text is None:
        return '<td align="center" colspan="1" rowspan="1"><para/></td>'
    if emphasis:
        text = f'<emphasis role="italic">{text}</emphasis>'
    return f'<td align="center" colspan="1" rowspan="1"><para>{text}</para></td>'


def make_row(cells: Sequence[Optional[str]], retired: bool = False) -> str:
    return "<tr valign=\"top\">" + "".join(_cell(c, emphasis=retired) for c in cells) + "</tr>"


def make_document(rows: Iterable[Sequence[Optional[str]]], table_id: str = "table_6-1",
                  retired_rows: Iterable[Sequence[Optional[str]]] = ()) -> bytes:
    """Build a DocBook document holding one data element table."""
    header = "<tr>" + "".join(f"<th><para>{h}</para></th>" for h in HEADER_ROW) + "</tr>"
    body = "".join(make_row(r) for r in rows) + "".join(make_row(r, retired=True) for r in retired_rows)
    text = (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<book xmlns="http://docbook.org/ns/docbook" xmlns:xl="http://www.w3.org/1999/xlink">'
        '<chapter label="6" xml:id="chapter_6">'
        '<title>Registry of DICOM Data Elements</title>'
        '<para>Preamble with a table reference <xref linkend="table_6-1"/>.</para>'
        f'<table frame="box" rules="all" xml:id="{table_id}">'
        '<caption>Registry of DICOM Data Elements</caption>'
        f'<thead>{header}</thead>'
        f'<tbody>{body}</tbody>'
        '</table>'
        '</chapter>'
        '</book>'
    )
    return text.encode("utf-8")


SAMPLE_ROWS = [
    ("(0008,0005)", "Specific Character Set", "SpecificCharacterSet", "CS", "1-n", None),
    ("(0010,0010)", "Patient's Name", "PatientName", "PN", "1", None),
    ("(0028,0106)", "Smallest Image Pixel Value", "SmallestImagePixelValue", "US or SS", "1", None),
    ("(60xx,3000)", "Overlay Data", "OverlayData", "OB or OW", "1", None),
    ("(0020,31xx)", "Source Image IDs", "SourceImageIDs", "CS", "1-n", "RET"),
    ("(1010,xxxx)", "Zonal Map", "ZonalMap", "US", "1-n", "RET"),
    ("(7FE0,0010)", "Pixel Data", "PixelData", "OB or OW", "1", None),
    ("(FFFE,E000)", "Item", "Item", "See Note", "1", None),
]

SAMPLE_RETIRED_ROWS = [
    ("(0008,0010)", "Recognition Code", "RecognitionCode", "SH", "1", "RET"),
]


@pytest.fixture
def sample_document() -> bytes:
    return make_document(SAMPLE_ROWS, retired_rows=SAMPLE_RETIRED_ROWS)


@pytest.fixture
def sample_path(tmp_path, sample_document):
    path = tmp_path / "part06.xml"
    path.write_bytes(sample_document)
    return path
