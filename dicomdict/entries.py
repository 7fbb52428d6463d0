# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Bundled standard attribute table

An excerpt of PS3.6 table 6-1: the commonly used attributes of the
patient, study, series, equipment, image and pixel modules, plus the
repeating overlay and curve groups. It uses the generated-table format,
so running ``dicomdict-build -o dicomdict/entries.py`` on a DocBook
edition of PS3.6 replaces it with the complete registry.

Copyright 2025 DNAi inc.
"""

from dicomdict.dictionary import DictionaryEntry as E
from dicomdict.tags import Tag, TagRange
from dicomdict.vr import VR

ENTRIES = [
    E(TagRange.single(Tag(0x0008, 0x0001)), "LengthToEnd", VR.UL),  # RET
    E(TagRange.single(Tag(0x0008, 0x0005)), "SpecificCharacterSet", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0006)), "LanguageCodeSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x0008)), "ImageType", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0010)), "RecognitionCode", VR.SH),  # RET
    E(TagRange.single(Tag(0x0008, 0x0012)), "InstanceCreationDate", VR.DA),
    E(TagRange.single(Tag(0x0008, 0x0013)), "InstanceCreationTime", VR.TM),
    E(TagRange.single(Tag(0x0008, 0x0014)), "InstanceCreatorUID", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x0015)), "InstanceCoercionDateTime", VR.DT),
    E(TagRange.single(Tag(0x0008, 0x0016)), "SOPClassUID", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x0018)), "SOPInstanceUID", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x001A)), "RelatedGeneralSOPClassUID", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x001B)), "OriginalSpecializedSOPClassUID", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x0020)), "StudyDate", VR.DA),
    E(TagRange.single(Tag(0x0008, 0x0021)), "SeriesDate", VR.DA),
    E(TagRange.single(Tag(0x0008, 0x0022)), "AcquisitionDate", VR.DA),
    E(TagRange.single(Tag(0x0008, 0x0023)), "ContentDate", VR.DA),
    E(TagRange.single(Tag(0x0008, 0x0024)), "OverlayDate", VR.DA),  # RET
    E(TagRange.single(Tag(0x0008, 0x0025)), "CurveDate", VR.DA),  # RET
    E(TagRange.single(Tag(0x0008, 0x002A)), "AcquisitionDateTime", VR.DT),
    E(TagRange.single(Tag(0x0008, 0x0030)), "StudyTime", VR.TM),
    E(TagRange.single(Tag(0x0008, 0x0031)), "SeriesTime", VR.TM),
    E(TagRange.single(Tag(0x0008, 0x0032)), "AcquisitionTime", VR.TM),
    E(TagRange.single(Tag(0x0008, 0x0033)), "ContentTime", VR.TM),
    E(TagRange.single(Tag(0x0008, 0x0034)), "OverlayTime", VR.TM),  # RET
    E(TagRange.single(Tag(0x0008, 0x0035)), "CurveTime", VR.TM),  # RET
    E(TagRange.single(Tag(0x0008, 0x0040)), "DataSetType", VR.US),  # RET
    E(TagRange.single(Tag(0x0008, 0x0041)), "DataSetSubtype", VR.LO),  # RET
    E(TagRange.single(Tag(0x0008, 0x0042)), "NuclearMedicineSeriesType", VR.CS),  # RET
    E(TagRange.single(Tag(0x0008, 0x0050)), "AccessionNumber", VR.SH),
    E(TagRange.single(Tag(0x0008, 0x0051)), "IssuerOfAccessionNumberSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x0052)), "QueryRetrieveLevel", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0053)), "QueryRetrieveView", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0054)), "RetrieveAETitle", VR.AE),
    E(TagRange.single(Tag(0x0008, 0x0055)), "StationAETitle", VR.AE),
    E(TagRange.single(Tag(0x0008, 0x0056)), "InstanceAvailability", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0058)), "FailedSOPInstanceUIDList", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x0060)), "Modality", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0061)), "ModalitiesInStudy", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0062)), "SOPClassesInStudy", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x0064)), "ConversionType", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0068)), "PresentationIntentType", VR.CS),
    E(TagRange.single(Tag(0x0008, 0x0070)), "Manufacturer", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x0080)), "InstitutionName", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x0081)), "InstitutionAddress", VR.ST),
    E(TagRange.single(Tag(0x0008, 0x0082)), "InstitutionCodeSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x0090)), "ReferringPhysicianName", VR.PN),
    E(TagRange.single(Tag(0x0008, 0x0092)), "ReferringPhysicianAddress", VR.ST),
    E(TagRange.single(Tag(0x0008, 0x0094)), "ReferringPhysicianTelephoneNumbers", VR.SH),
    E(TagRange.single(Tag(0x0008, 0x0096)), "ReferringPhysicianIdentificationSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x0100)), "CodeValue", VR.SH),
    E(TagRange.single(Tag(0x0008, 0x0102)), "CodingSchemeDesignator", VR.SH),
    E(TagRange.single(Tag(0x0008, 0x0103)), "CodingSchemeVersion", VR.SH),
    E(TagRange.single(Tag(0x0008, 0x0104)), "CodeMeaning", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x0201)), "TimezoneOffsetFromUTC", VR.SH),
    E(TagRange.single(Tag(0x0008, 0x1010)), "StationName", VR.SH),
    E(TagRange.single(Tag(0x0008, 0x1030)), "StudyDescription", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x1032)), "ProcedureCodeSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x103E)), "SeriesDescription", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x1040)), "InstitutionalDepartmentName", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x1048)), "PhysiciansOfRecord", VR.PN),
    E(TagRange.single(Tag(0x0008, 0x1050)), "PerformingPhysicianName", VR.PN),
    E(TagRange.single(Tag(0x0008, 0x1060)), "NameOfPhysiciansReadingStudy", VR.PN),
    E(TagRange.single(Tag(0x0008, 0x1070)), "OperatorsName", VR.PN),
    E(TagRange.single(Tag(0x0008, 0x1080)), "AdmittingDiagnosesDescription", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x1090)), "ManufacturerModelName", VR.LO),
    E(TagRange.single(Tag(0x0008, 0x1110)), "ReferencedStudySequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x1111)), "ReferencedPerformedProcedureStepSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x1115)), "ReferencedSeriesSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x1120)), "ReferencedPatientSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x1140)), "ReferencedImageSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x1150)), "ReferencedSOPClassUID", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x1155)), "ReferencedSOPInstanceUID", VR.UI),
    E(TagRange.single(Tag(0x0008, 0x1160)), "ReferencedFrameNumber", VR.IS),
    E(TagRange.single(Tag(0x0008, 0x2111)), "DerivationDescription", VR.ST),
    E(TagRange.single(Tag(0x0008, 0x2112)), "SourceImageSequence", VR.SQ),
    E(TagRange.single(Tag(0x0008, 0x9007)), "FrameType", VR.CS),
    E(TagRange.single(Tag(0x0010, 0x0010)), "PatientName", VR.PN),
    E(TagRange.single(Tag(0x0010, 0x0020)), "PatientID", VR.LO),
    E(TagRange.single(Tag(0x0010, 0x0021)), "IssuerOfPatientID", VR.LO),
    E(TagRange.single(Tag(0x0010, 0x0030)), "PatientBirthDate", VR.DA),
    E(TagRange.single(Tag(0x0010, 0x0032)), "PatientBirthTime", VR.TM),
    E(TagRange.single(Tag(0x0010, 0x0040)), "PatientSex", VR.CS),
    E(TagRange.single(Tag(0x0010, 0x1000)), "OtherPatientIDs", VR.LO),  # RET
    E(TagRange.single(Tag(0x0010, 0x1001)), "OtherPatientNames", VR.PN),
    E(TagRange.single(Tag(0x0010, 0x1010)), "PatientAge", VR.AS),
    E(TagRange.single(Tag(0x0010, 0x1020)), "PatientSize", VR.DS),
    E(TagRange.single(Tag(0x0010, 0x1030)), "PatientWeight", VR.DS),
    E(TagRange.single(Tag(0x0010, 0x1040)), "PatientAddress", VR.LO),
    E(TagRange.single(Tag(0x0010, 0x2160)), "EthnicGroup", VR.SH),
    E(TagRange.single(Tag(0x0010, 0x21B0)), "AdditionalPatientHistory", VR.LT),
    E(TagRange.single(Tag(0x0010, 0x4000)), "PatientComments", VR.LT),
    E(TagRange.single(Tag(0x0018, 0x0010)), "ContrastBolusAgent", VR.LO),
    E(TagRange.single(Tag(0x0018, 0x0015)), "BodyPartExamined", VR.CS),
    E(TagRange.single(Tag(0x0018, 0x0020)), "ScanningSequence", VR.CS),
    E(TagRange.single(Tag(0x0018, 0x0021)), "SequenceVariant", VR.CS),
    E(TagRange.single(Tag(0x0018, 0x0022)), "ScanOptions", VR.CS),
    E(TagRange.single(Tag(0x0018, 0x0023)), "MRAcquisitionType", VR.CS),
    E(TagRange.single(Tag(0x0018, 0x0050)), "SliceThickness", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0060)), "KVP", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0080)), "RepetitionTime", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0081)), "EchoTime", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0082)), "InversionTime", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0083)), "NumberOfAverages", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0084)), "ImagingFrequency", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0087)), "MagneticFieldStrength", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0088)), "SpacingBetweenSlices", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x0091)), "EchoTrainLength", VR.IS),
    E(TagRange.single(Tag(0x0018, 0x1000)), "DeviceSerialNumber", VR.LO),
    E(TagRange.single(Tag(0x0018, 0x1020)), "SoftwareVersions", VR.LO),
    E(TagRange.single(Tag(0x0018, 0x1030)), "ProtocolName", VR.LO),
    E(TagRange.single(Tag(0x0018, 0x1150)), "ExposureTime", VR.IS),
    E(TagRange.single(Tag(0x0018, 0x1151)), "XRayTubeCurrent", VR.IS),
    E(TagRange.single(Tag(0x0018, 0x1152)), "Exposure", VR.IS),
    E(TagRange.single(Tag(0x0018, 0x1160)), "FilterType", VR.SH),
    E(TagRange.single(Tag(0x0018, 0x1164)), "ImagerPixelSpacing", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x1210)), "ConvolutionKernel", VR.SH),
    E(TagRange.single(Tag(0x0018, 0x1314)), "FlipAngle", VR.DS),
    E(TagRange.single(Tag(0x0018, 0x5100)), "PatientPosition", VR.CS),
    E(TagRange.single(Tag(0x0020, 0x000D)), "StudyInstanceUID", VR.UI),
    E(TagRange.single(Tag(0x0020, 0x000E)), "SeriesInstanceUID", VR.UI),
    E(TagRange.single(Tag(0x0020, 0x0010)), "StudyID", VR.SH),
    E(TagRange.single(Tag(0x0020, 0x0011)), "SeriesNumber", VR.IS),
    E(TagRange.single(Tag(0x0020, 0x0012)), "AcquisitionNumber", VR.IS),
    E(TagRange.single(Tag(0x0020, 0x0013)), "InstanceNumber", VR.IS),
    E(TagRange.single(Tag(0x0020, 0x0020)), "PatientOrientation", VR.CS),
    E(TagRange.single(Tag(0x0020, 0x0030)), "ImagePosition", VR.DS),  # RET
    E(TagRange.single(Tag(0x0020, 0x0032)), "ImagePositionPatient", VR.DS),
    E(TagRange.single(Tag(0x0020, 0x0035)), "ImageOrientation", VR.DS),  # RET
    E(TagRange.single(Tag(0x0020, 0x0037)), "ImageOrientationPatient", VR.DS),
    E(TagRange.single(Tag(0x0020, 0x0052)), "FrameOfReferenceUID", VR.UI),
    E(TagRange.single(Tag(0x0020, 0x0060)), "Laterality", VR.CS),
    E(TagRange.single(Tag(0x0020, 0x1040)), "PositionReferenceIndicator", VR.LO),
    E(TagRange.single(Tag(0x0020, 0x1041)), "SliceLocation", VR.DS),
    E(TagRange.element100(Tag(0x0020, 0x3100)), "SourceImageIDs", VR.CS),  # RET
    E(TagRange.single(Tag(0x0020, 0x4000)), "ImageComments", VR.LT),
    E(TagRange.single(Tag(0x0028, 0x0002)), "SamplesPerPixel", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0004)), "PhotometricInterpretation", VR.CS),
    E(TagRange.single(Tag(0x0028, 0x0006)), "PlanarConfiguration", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0008)), "NumberOfFrames", VR.IS),
    E(TagRange.single(Tag(0x0028, 0x0010)), "Rows", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0011)), "Columns", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0030)), "PixelSpacing", VR.DS),
    E(TagRange.single(Tag(0x0028, 0x0034)), "PixelAspectRatio", VR.IS),
    E(TagRange.single(Tag(0x0028, 0x0100)), "BitsAllocated", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0101)), "BitsStored", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0102)), "HighBit", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0103)), "PixelRepresentation", VR.US),
    E(TagRange.single(Tag(0x0028, 0x0106)), "SmallestImagePixelValue", VR.US),  # or SS
    E(TagRange.single(Tag(0x0028, 0x0107)), "LargestImagePixelValue", VR.US),  # or SS
    E(TagRange.single(Tag(0x0028, 0x1050)), "WindowCenter", VR.DS),
    E(TagRange.single(Tag(0x0028, 0x1051)), "WindowWidth", VR.DS),
    E(TagRange.single(Tag(0x0028, 0x1052)), "RescaleIntercept", VR.DS),
    E(TagRange.single(Tag(0x0028, 0x1053)), "RescaleSlope", VR.DS),
    E(TagRange.single(Tag(0x0028, 0x1054)), "RescaleType", VR.LO),
    E(TagRange.single(Tag(0x0028, 0x1055)), "WindowCenterWidthExplanation", VR.LO),
    E(TagRange.single(Tag(0x0028, 0x2110)), "LossyImageCompression", VR.CS),
    E(TagRange.single(Tag(0x0028, 0x3000)), "ModalityLUTSequence", VR.SQ),
    E(TagRange.single(Tag(0x0028, 0x3010)), "VOILUTSequence", VR.SQ),
    E(TagRange.single(Tag(0x0032, 0x1060)), "RequestedProcedureDescription", VR.LO),
    E(TagRange.single(Tag(0x0040, 0x0244)), "PerformedProcedureStepStartDate", VR.DA),
    E(TagRange.single(Tag(0x0040, 0x0245)), "PerformedProcedureStepStartTime", VR.TM),
    E(TagRange.single(Tag(0x0040, 0x0253)), "PerformedProcedureStepID", VR.SH),
    E(TagRange.single(Tag(0x0040, 0x0254)), "PerformedProcedureStepDescription", VR.LO),
    E(TagRange.single(Tag(0x0040, 0x0275)), "RequestAttributesSequence", VR.SQ),
    E(TagRange.single(Tag(0x0040, 0xA730)), "ContentSequence", VR.SQ),
    E(TagRange.group100(Tag(0x5000, 0x0005)), "CurveDimensions", VR.US),  # RET
    E(TagRange.group100(Tag(0x5000, 0x0010)), "NumberOfPoints", VR.US),  # RET
    E(TagRange.group100(Tag(0x5000, 0x3000)), "CurveData", VR.OB),  # or OW; RET
    E(TagRange.group100(Tag(0x6000, 0x0010)), "OverlayRows", VR.US),
    E(TagRange.group100(Tag(0x6000, 0x0011)), "OverlayColumns", VR.US),
    E(TagRange.group100(Tag(0x6000, 0x0015)), "NumberOfFramesInOverlay", VR.IS),
    E(TagRange.group100(Tag(0x6000, 0x0022)), "OverlayDescription", VR.LO),
    E(TagRange.group100(Tag(0x6000, 0x0040)), "OverlayType", VR.CS),
    E(TagRange.group100(Tag(0x6000, 0x0045)), "OverlaySubtype", VR.LO),
    E(TagRange.group100(Tag(0x6000, 0x0050)), "OverlayOrigin", VR.SS),
    E(TagRange.group100(Tag(0x6000, 0x0051)), "ImageFrameOrigin", VR.US),
    E(TagRange.group100(Tag(0x6000, 0x0100)), "OverlayBitsAllocated", VR.US),
    E(TagRange.group100(Tag(0x6000, 0x0102)), "OverlayBitPosition", VR.US),
    E(TagRange.group100(Tag(0x6000, 0x1500)), "OverlayLabel", VR.LO),
    E(TagRange.group100(Tag(0x6000, 0x3000)), "OverlayData", VR.OB),  # or OW
    E(TagRange.single(Tag(0x7FE0, 0x0001)), "ExtendedOffsetTable", VR.OV),
    E(TagRange.single(Tag(0x7FE0, 0x0002)), "ExtendedOffsetTableLengths", VR.OV),
    E(TagRange.single(Tag(0x7FE0, 0x0008)), "FloatPixelData", VR.OF),
    E(TagRange.single(Tag(0x7FE0, 0x0009)), "DoubleFloatPixelData", VR.OD),
    E(TagRange.single(Tag(0x7FE0, 0x0010)), "PixelData", VR.OB),  # or OW
    E(TagRange.group100(Tag(0x7F00, 0x0010)), "VariablePixelData", VR.OB),  # or OW; RET
    E(TagRange.single(Tag(0xFFFA, 0xFFFA)), "DigitalSignaturesSequence", VR.SQ),
    E(TagRange.single(Tag(0xFFFC, 0xFFFC)), "DataSetTrailingPadding", VR.OB),
    E(TagRange.single(Tag(0xFFFE, 0xE000)), "Item", VR.UN),  # See Note
    E(TagRange.single(Tag(0xFFFE, 0xE00D)), "ItemDelimitationItem", VR.UN),  # See Note
    E(TagRange.single(Tag(0xFFFE, 0xE0DD)), "SequenceDelimitationItem", VR.UN),  # See Note
]
