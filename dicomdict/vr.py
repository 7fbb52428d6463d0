# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
DICOM value representations

The value representation (VR) describes the data type and format of an
attribute's value, as defined in DICOM PS3.5 section 6.2.

Copyright 2025 DNAi inc.
"""

from enum import Enum
from typing import Optional


class VR(Enum):
    """Value representation codes."""
    AE = "AE"  # Application Entity
    AS = "AS"  # Age String
    AT = "AT"  # Attribute Tag
    CS = "CS"  # Code String
    DA = "DA"  # Date
    DS = "DS"  # Decimal String
    DT = "DT"  # Date Time
    FD = "FD"  # Floating Point Double
    FL = "FL"  # Floating Point Single
    IS = "IS"  # Integer String
    LO = "LO"  # Long String
    LT = "LT"  # Long Text
    OB = "OB"  # Other Byte
    OD = "OD"  # Other Double
    OF = "OF"  # Other Float
    OL = "OL"  # Other Long
    OV = "OV"  # Other 64-bit Very Long
    OW = "OW"  # Other Word
    PN = "PN"  # Person Name
    SH = "SH"  # Short String
    SL = "SL"  # Signed Long
    SQ = "SQ"  # Sequence of Items
    SS = "SS"  # Signed Short
    ST = "ST"  # Short Text
    SV = "SV"  # Signed 64-bit Very Long
    TM = "TM"  # Time
    UC = "UC"  # Unlimited Characters
    UI = "UI"  # Unique Identifier (UID)
    UL = "UL"  # Unsigned Long
    UN = "UN"  # Unknown
    UR = "UR"  # Universal Resource Identifier
    US = "US"  # Unsigned Short
    UT = "UT"  # Unlimited Text
    UV = "UV"  # Unsigned 64-bit Very Long

    @classmethod
    def from_code(cls, code: str) -> Optional['VR']:
        """
        Look up a VR by its two-letter code.

        Args:
            code: Two-letter VR code (case sensitive)

        Returns:
            VR member, or None if the code is not a known VR
        """
        try:
            return cls(code)
        except ValueError:
            return None
