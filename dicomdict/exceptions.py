# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for DICOMDict

This module defines the exceptions raised by the dictionary model,
the PS3.6 extraction pipeline and the artifact emitters.

Copyright 2025 DNAi inc.
"""


class DICOMDictError(Exception):
    """
    Base exception for all DICOMDict errors.

    All DICOMDict exceptions inherit from this class, allowing
    catch-all error handling for any dictionary-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class TagRangeParseError(DICOMDictError, ValueError):
    """
    Raised when a tag range text cannot be parsed.

    Each failure carries a machine-readable ``reason``:
    - ``component_count``: not exactly two comma separated components
    - ``group_length`` / ``element_length``: a component is not 4 characters
    - ``invalid_group`` / ``invalid_element``: non-hexadecimal digits
    - ``unsupported_range``: both group and element are wildcards
    """
    def __init__(self, message: str = "", reason: str = ""):
        self.reason = reason
        super().__init__(message)


class DictionaryReadError(DICOMDictError):
    """
    Raised when the source document cannot be read.

    This exception is raised when:
    - The document is not well-formed XML
    - The underlying stream or download fails
    - The source location does not exist
    """
    pass


class DictionaryWriteError(DICOMDictError):
    """
    Raised when a generated artifact cannot be written.

    This exception is raised when:
    - The destination directory cannot be created
    - The destination file is not writable
    """
    pass
