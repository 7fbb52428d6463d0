# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Dictionary builder configuration

Copyright 2025 DNAi inc.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dicomdict.emitter import OutputFormat
from dicomdict.extraction import DEFAULT_CHUNK_SIZE, DEFAULT_TABLE_ID


# DocBook edition of PS3.6, current release
DEFAULT_LOCATION = "http://dicom.nema.org/medical/dicom/current/source/docbook/part06/part06.xml"

DEFAULT_TIMEOUT = 60.0


@dataclass
class BuilderConfig:
    """
    Settings of one dictionary build.

    Attributes:
        source: URL or path of the PS3.6 XML document
        output: Path of the artifact; defaults to entries.py or entries.json
        output_format: Kind of artifact to write
        include_retired: Whether retired attributes are written
        table_id: Identifier of the data element table in the document
        chunk_size: Bytes read at a time from the source
        timeout: Network timeout in seconds for remote sources
    """
    source: str = DEFAULT_LOCATION
    output: Optional[Path] = None
    output_format: OutputFormat = OutputFormat.PY
    include_retired: bool = True
    table_id: str = DEFAULT_TABLE_ID
    chunk_size: int = DEFAULT_CHUNK_SIZE
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if self.output is None:
            self.output = Path(self.output_format.default_filename)
        else:
            self.output = Path(self.output)
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'BuilderConfig':
        """
        Build the configuration from parsed command-line arguments.

        Args:
            args: Namespace produced by the CLI argument parser

        Returns:
            BuilderConfig
        """
        return cls(
            source=args.source,
            output=Path(args.output).expanduser() if args.output else None,
            output_format=OutputFormat(args.format),
            include_retired=not args.no_retired,
            table_id=args.table_id,
            timeout=args.timeout,
        )
