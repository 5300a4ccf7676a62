"""Unit tests for the object detection payload decoder."""

import base64
import json

import pytest

from core.exceptions import DecodeError
from core.models import BoundingBox, Detection
from core.schemas import object_detection_generated as schema
from services.retrieval.deserializer import (
    decode_inference_payload,
    deserialize_object_detection,
    serialize_detections,
)
from tests.helpers import build_object_detection, build_top_without_perception

DETECTIONS = [
    (1, 0.75, (10, 20, 30, 40)),
    (3, 0.5, (100, 120, 220, 300)),
    (0, 0.25, (0, 0, 5, 5)),
]


class TestDeserializeObjectDetection:
    """Tests for decoding well-formed buffers."""

    def test_single_detection(self):
        buf = build_object_detection([(1, 0.75, (10, 20, 30, 40))])

        detections = deserialize_object_detection(buf)

        assert detections == [
            Detection(class_id=1, score=0.75, bbox=BoundingBox(left=10, top=20, right=30, bottom=40))
        ]

    def test_preserves_buffer_order(self):
        detections = deserialize_object_detection(build_object_detection(DETECTIONS))

        assert [d.class_id for d in detections] == [1, 3, 0]
        assert [d.score for d in detections] == [0.75, 0.5, 0.25]
        assert detections[1].bbox.to_xyxy() == (100, 120, 220, 300)

    def test_zero_valued_fields_use_schema_defaults(self):
        """Builders omit fields equal to their default; they decode as 0."""
        detections = deserialize_object_detection(build_object_detection([(0, 0.0, (0, 0, 0, 0))]))

        assert detections == [Detection(class_id=0, score=0.0, bbox=BoundingBox(0, 0, 0, 0))]

    def test_negative_coordinates(self):
        detections = deserialize_object_detection(build_object_detection([(2, 0.5, (-4, -8, 16, 32))]))

        assert detections[0].bbox == BoundingBox(left=-4, top=-8, right=16, bottom=32)
        assert detections[0].bbox.width == 20
        assert detections[0].bbox.height == 40

    def test_empty_detection_list(self):
        assert deserialize_object_detection(build_object_detection([])) == []

    def test_accepts_bytearray(self):
        buf = bytearray(build_object_detection(DETECTIONS))

        assert len(deserialize_object_detection(buf)) == 3

    def test_is_deterministic(self):
        buf = build_object_detection(DETECTIONS)

        assert deserialize_object_detection(buf) == deserialize_object_detection(buf)


class TestDeserializeMalformed:
    """Malformed buffers must fail instead of yielding partial records."""

    @pytest.mark.parametrize("length", [0, 3, 8])
    def test_short_buffers(self, length):
        buf = build_object_detection(DETECTIONS)[:length]

        with pytest.raises(DecodeError):
            deserialize_object_detection(buf)

    def test_truncated_prefix_fails(self):
        buf = build_object_detection(DETECTIONS)

        with pytest.raises(DecodeError):
            deserialize_object_detection(buf[: len(buf) // 2])

    def test_every_truncation_of_single_detection_fails(self):
        buf = build_object_detection([(7, 0.75, (1, 2, 3, 4))])
        for length in range(len(buf)):
            with pytest.raises(DecodeError):
                deserialize_object_detection(buf[:length])

    def test_root_offset_out_of_range(self):
        buf = bytearray(build_object_detection(DETECTIONS))
        buf[0:4] = (len(buf) + 100).to_bytes(4, "little")

        with pytest.raises(DecodeError):
            deserialize_object_detection(bytes(buf))

    def test_missing_perception(self):
        with pytest.raises(DecodeError, match="perception"):
            deserialize_object_detection(build_top_without_perception())

    def test_unsupported_bounding_box_type(self):
        buf = build_object_detection([(1, 0.75, (10, 20, 30, 40))], bbox_type=schema.BoundingBox.NONE)

        with pytest.raises(DecodeError, match="bounding box type"):
            deserialize_object_detection(buf)

    def test_garbage(self):
        with pytest.raises(DecodeError):
            deserialize_object_detection(b"\xff" * 64)


class TestDecodeInferencePayload:
    """Tests for the base64 layer."""

    def test_decodes_base64(self):
        payload = base64.b64encode(build_object_detection(DETECTIONS)).decode("ascii")

        assert len(decode_inference_payload(payload)) == 3

    def test_invalid_base64(self):
        with pytest.raises(DecodeError, match="base64"):
            decode_inference_payload("not base64!!")

    def test_non_string_payload(self):
        with pytest.raises(DecodeError, match="base64"):
            decode_inference_payload(123)


class TestSerializeDetections:
    """Tests for the JSON form handed to the front-end."""

    def test_keyed_by_one_based_index(self):
        detections = deserialize_object_detection(build_object_detection(DETECTIONS[:2]))

        text = serialize_detections(detections)

        assert json.loads(text) == {
            "1": {"C": 1, "P": 0.75, "X": 10, "Y": 20, "x": 30, "y": 40},
            "2": {"C": 3, "P": 0.5, "X": 100, "Y": 120, "x": 220, "y": 300},
        }

    def test_compact_separators(self):
        detection = Detection(class_id=1, score=0.5, bbox=BoundingBox(1, 2, 3, 4))

        assert serialize_detections([detection]) == '{"1":{"C":1,"P":0.5,"X":1,"Y":2,"x":3,"y":4}}'

    def test_no_detections(self):
        assert serialize_detections([]) == "{}"
