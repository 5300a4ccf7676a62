"""
Core enumerations package for the inference viewer service.
"""

from .query_types import SortOrder, ResultFormat

__all__ = [
    'SortOrder',
    'ResultFormat'
]
