# Core Models Package
"""
Core data models for the inference viewer service.
Contains decoded detections, query windows and the records returned to callers.
"""

from .detection_models import (
    BoundingBox,
    Detection,
    QueryWindow,
    ImageRecord,
    OutputRecord
)

__all__ = [
    'BoundingBox',
    'Detection',
    'QueryWindow',
    'ImageRecord',
    'OutputRecord'
]
