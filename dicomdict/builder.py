# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Dictionary builder

Downloads or reads the PS3.6 document, extracts the data element table
and writes the requested artifact.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from dicomdict.config import BuilderConfig
from dicomdict.emitter import OutputFormat, write_artifact
from dicomdict.extraction import iter_raw_records
from dicomdict.source import open_source

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a dictionary build."""
    output: Path
    output_format: OutputFormat
    entry_count: int


def build_dictionary(config: BuilderConfig) -> BuildResult:
    """
    Build a dictionary artifact.

    Args:
        config: Build settings

    Returns:
        BuildResult describing the written artifact

    Raises:
        DictionaryReadError: If the source document cannot be read
        DictionaryWriteError: If the artifact cannot be written
    """
    with open_source(config.source, chunk_size=config.chunk_size, timeout=config.timeout) as chunks:
        records = iter_raw_records(chunks, table_id=config.table_id)
        logger.info("Writing %s dictionary to %s%s", config.output_format.value, config.output,
                    "" if config.include_retired else " (retired attributes excluded)")
        count = write_artifact(config.output, records, config.output_format, config.include_retired)
    return BuildResult(output=config.output, output_format=config.output_format, entry_count=count)
