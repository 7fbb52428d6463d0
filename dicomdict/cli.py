# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for the DICOM dictionary builder

Retrieves the data dictionary from the DICOM standard (online by
default, or a local copy of part06.xml) and writes it either as the
Python entry table used by ``dicomdict.standard`` or as JSON.

Copyright 2025 DNAi inc.
"""

import argparse
import logging
import sys
from typing import List, Optional

from dicomdict import __version__
from dicomdict.builder import build_dictionary
from dicomdict.config import DEFAULT_LOCATION, DEFAULT_TIMEOUT, BuilderConfig
from dicomdict.emitter import OutputFormat
from dicomdict.exceptions import DICOMDictError
from dicomdict.extraction import DEFAULT_TABLE_ID


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='dicomdict-build',
        description="Build the DICOM data dictionary from the PS3.6 XML document."
    )
    parser.add_argument('source', nargs='?', default=DEFAULT_LOCATION, metavar='FROM',
                        help="URL or path of the PS3.6 XML document (default: %(default)s)")
    parser.add_argument('-o', '--output', default=None,
                        help="Path to the output file (default: entries.py or entries.json)")
    parser.add_argument('-f', '--format', default=OutputFormat.PY.value,
                        choices=[f.value for f in OutputFormat],
                        help="Output format (default: %(default)s)")
    parser.add_argument('--no-retired', action='store_true',
                        help="Ignore retired attributes")
    parser.add_argument('--table-id', default=DEFAULT_TABLE_ID,
                        help="xml:id of the data element table (default: %(default)s)")
    parser.add_argument('--timeout', type=float, default=DEFAULT_TIMEOUT,
                        help="Network timeout in seconds (default: %(default)s)")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Show debug output")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = BuilderConfig.from_args(args)
        result = build_dictionary(config)
    except DICOMDictError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"Wrote {result.entry_count} entries to {result.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
