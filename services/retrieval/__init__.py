"""
Retrieval of device images paired with their decoded inference results.
"""

from .deserializer import decode_inference_payload, deserialize_object_detection, serialize_detections
from .orchestrator import ImageInferenceService
from .time_window import resolve_window

__all__ = [
    'ImageInferenceService',
    'resolve_window',
    'deserialize_object_detection',
    'decode_inference_payload',
    'serialize_detections'
]
