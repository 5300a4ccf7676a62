"""
Query parameter enumerations for the Console API.
"""

from enum import Enum


class SortOrder(str, Enum):
    """Ordering of the image listing by capture time"""
    ASC = "ASC"
    DESC = "DESC"


class ResultFormat(int, Enum):
    """Inference result encoding requested from the Console"""
    DECODED = 0
    RAW = 1
