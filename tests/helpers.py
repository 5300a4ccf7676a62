"""Builders for Console payloads used across the test suite."""

import base64
from typing import Iterable, Optional, Tuple

import flatbuffers

from core.schemas import object_detection_generated as schema

# (class_id, score, (left, top, right, bottom))
DetectionSpec = Tuple[int, float, Tuple[int, int, int, int]]


def build_object_detection(
    detections: Iterable[DetectionSpec],
    bbox_type: int = schema.BoundingBox.BoundingBox2d
) -> bytes:
    """Serialize detections as a SmartCamera.ObjectDetectionTop buffer."""
    builder = flatbuffers.Builder(256)

    objects = []
    for class_id, score, (left, top, right, bottom) in detections:
        schema.BoundingBox2dStart(builder)
        schema.BoundingBox2dAddLeft(builder, left)
        schema.BoundingBox2dAddTop(builder, top)
        schema.BoundingBox2dAddRight(builder, right)
        schema.BoundingBox2dAddBottom(builder, bottom)
        bbox = schema.BoundingBox2dEnd(builder)

        schema.GeneralObjectStart(builder)
        schema.GeneralObjectAddClassId(builder, class_id)
        schema.GeneralObjectAddBoundingBoxType(builder, bbox_type)
        schema.GeneralObjectAddBoundingBox(builder, bbox)
        schema.GeneralObjectAddScore(builder, score)
        objects.append(schema.GeneralObjectEnd(builder))

    schema.ObjectDetectionDataStartObjectDetectionListVector(builder, len(objects))
    for obj in reversed(objects):
        builder.PrependUOffsetTRelative(obj)
    object_list = builder.EndVector()

    schema.ObjectDetectionDataStart(builder)
    schema.ObjectDetectionDataAddObjectDetectionList(builder, object_list)
    perception = schema.ObjectDetectionDataEnd(builder)

    schema.ObjectDetectionTopStart(builder)
    schema.ObjectDetectionTopAddPerception(builder, perception)
    builder.Finish(schema.ObjectDetectionTopEnd(builder))
    return bytes(builder.Output())


def build_top_without_perception() -> bytes:
    builder = flatbuffers.Builder(32)
    schema.ObjectDetectionTopStart(builder)
    builder.Finish(schema.ObjectDetectionTopEnd(builder))
    return bytes(builder.Output())


def encode_payload(detections: Iterable[DetectionSpec]) -> str:
    return base64.b64encode(build_object_detection(detections)).decode("ascii")


def inference_results(payload: Optional[str], timestamp: str = "20230126052344873") -> list:
    """Body of a successful inference lookup with one result."""
    return [
        {
            "id": f"device-1_{timestamp}",
            "device_id": "device-1",
            "model_id": "0308000000000100",
            "inference_result": {
                "DeviceID": "device-1",
                "ModelID": "0308000000000100",
                "Image": True,
                "Inferences": [{"T": timestamp, "O": payload}],
            },
        }
    ]
