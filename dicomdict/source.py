# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Source document access

Opens the PS3.6 document either from the DICOM website or from a local
file, and exposes it as a stream of byte chunks.

Copyright 2025 DNAi inc.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

import requests

from dicomdict.exceptions import DictionaryReadError
from dicomdict.extraction import DEFAULT_CHUNK_SIZE, iter_chunks

logger = logging.getLogger(__name__)


def is_remote(location: str) -> bool:
    return location.startswith(('http:', 'https:'))


@contextmanager
def open_source(location: str, chunk_size: int = DEFAULT_CHUNK_SIZE,
                timeout: float = 60.0) -> Iterator[Iterable[bytes]]:
    """
    Open the source document.

    Args:
        location: http(s) URL or local file path
        chunk_size: Size of the chunks to yield
        timeout: Network timeout in seconds

    Yields:
        Iterable of byte chunks of the document

    Raises:
        DictionaryReadError: If the document cannot be opened
    """
    if is_remote(location):
        logger.info("Downloading DICOM dictionary from %s", location)
        try:
            response = requests.get(location, stream=True, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DictionaryReadError(f"Failed to download {location}: {e}") from e
        try:
            yield response.iter_content(chunk_size=chunk_size)
        finally:
            response.close()
    else:
        path = Path(location).expanduser()
        logger.info("Reading DICOM dictionary from %s", path)
        try:
            handle = open(path, 'rb')
        except OSError as e:
            raise DictionaryReadError(f"Cannot open {path}: {e}") from e
        with handle:
            yield iter_chunks(handle, chunk_size)
