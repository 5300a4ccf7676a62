# services/retrieval/deserializer.py
"""
Decoder for the object detection output tensor uploaded by edge devices.

The payload is a FlatBuffers ``SmartCamera.ObjectDetectionTop`` message. The
Python FlatBuffers runtime does not verify buffers, so every offset the
accessors will follow is bounds checked first and a malformed or truncated
buffer raises ``DecodeError`` instead of yielding partial records.
"""

import base64
import binascii
import json
import logging
from collections import namedtuple
from typing import List, Optional, Sequence

import flatbuffers

from core.exceptions import DecodeError
from core.models import BoundingBox, Detection
from core.schemas import object_detection_generated as schema
from shared.decorators.timing import time_execution

logger = logging.getLogger(__name__)

_packer = flatbuffers.packer

# vtable slots, in bytes from the start of the vtable
_TOP_PERCEPTION = 4
_DATA_OBJECT_LIST = 4
_OBJECT_CLASS_ID = 4
_OBJECT_BBOX_TYPE = 6
_OBJECT_BBOX = 8
_OBJECT_SCORE = 10
_BBOX_FIELDS = (4, 6, 8, 10)

_Table = namedtuple('_Table', ['pos', 'vtable', 'vtable_size', 'table_size'])


class _Verifier:
    """Bounds checks a buffer against the object detection schema"""

    def __init__(self, buf: bytes):
        self._buf = buf
        self._size = len(buf)

    def _require(self, pos: int, length: int, what: str) -> None:
        if pos < 0 or length < 0 or pos + length > self._size:
            raise DecodeError(
                f"Malformed inference payload: {what} at offset {pos} "
                f"exceeds buffer of {self._size} bytes"
            )

    def _read(self, packer, pos: int, what: str):
        self._require(pos, packer.size, what)
        return flatbuffers.encode.Get(packer, self._buf, pos)

    def indirect(self, pos: int, what: str) -> int:
        return pos + self._read(_packer.uoffset, pos, what)

    def table(self, pos: int, what: str) -> _Table:
        vtable = pos - self._read(_packer.soffset, pos, what)
        vtable_size = self._read(_packer.voffset, vtable, f"{what} vtable")
        table_size = self._read(_packer.voffset, vtable + 2, f"{what} vtable")
        if vtable_size < 4 or vtable_size % 2:
            raise DecodeError(f"Malformed inference payload: invalid {what} vtable size {vtable_size}")
        self._require(vtable, vtable_size, f"{what} vtable")
        self._require(pos, table_size, what)
        return _Table(pos, vtable, vtable_size, table_size)

    def _field(self, table: _Table, slot: int, width: int, what: str) -> int:
        if slot + 2 > table.vtable_size:
            return 0
        offset = self._read(_packer.voffset, table.vtable + slot, what)
        if offset and offset + width > table.table_size:
            raise DecodeError(f"Malformed inference payload: {what} lies outside its table")
        return offset

    def scalar(self, table: _Table, slot: int, packer, what: str, default=0):
        offset = self._field(table, slot, packer.size, what)
        if offset == 0:
            return default
        return self._read(packer, table.pos + offset, what)

    def sub_table(self, table: _Table, slot: int, what: str) -> Optional[_Table]:
        offset = self._field(table, slot, _packer.uoffset.size, what)
        if offset == 0:
            return None
        return self.table(self.indirect(table.pos + offset, what), what)

    def table_vector(self, table: _Table, slot: int, what: str) -> List[_Table]:
        offset = self._field(table, slot, _packer.uoffset.size, what)
        if offset == 0:
            return []
        vector = self.indirect(table.pos + offset, what)
        length = self._read(_packer.uoffset, vector, f"{what} length")
        self._require(vector + 4, length * 4, what)
        return [
            self.table(self.indirect(vector + 4 + i * 4, f"{what}[{i}]"), f"{what}[{i}]")
            for i in range(length)
        ]


def _verify(buf: bytes) -> None:
    verifier = _Verifier(buf)
    top = verifier.table(verifier.indirect(0, 'root offset'), 'ObjectDetectionTop')

    perception = verifier.sub_table(top, _TOP_PERCEPTION, 'perception')
    if perception is None:
        raise DecodeError("Malformed inference payload: perception data is missing")

    objects = verifier.table_vector(perception, _DATA_OBJECT_LIST, 'object_detection_list')
    for index, obj in enumerate(objects):
        what = f"object_detection_list[{index}]"
        verifier.scalar(obj, _OBJECT_CLASS_ID, _packer.uint32, f"{what}.class_id")
        verifier.scalar(obj, _OBJECT_SCORE, _packer.float32, f"{what}.score", 0.0)

        bbox_type = verifier.scalar(obj, _OBJECT_BBOX_TYPE, _packer.uint8, f"{what}.bounding_box_type")
        if bbox_type != schema.BoundingBox.BoundingBox2d:
            raise DecodeError(
                f"Malformed inference payload: unsupported bounding box type {bbox_type} in {what}"
            )
        bbox = verifier.sub_table(obj, _OBJECT_BBOX, f"{what}.bounding_box")
        if bbox is None:
            raise DecodeError(f"Malformed inference payload: {what} has no bounding box")
        for slot in _BBOX_FIELDS:
            verifier.scalar(bbox, slot, _packer.int32, f"{what}.bounding_box")


@time_execution
def deserialize_object_detection(buffer: bytes) -> List[Detection]:
    """
    Decode an ObjectDetectionTop buffer into detections, in buffer order.

    Raises:
        DecodeError: buffer is truncated or does not follow the schema
    """
    buf = bytes(buffer)
    _verify(buf)

    perception = schema.ObjectDetectionTop.GetRootAs(buf, 0).Perception()
    detections = []
    for i in range(perception.ObjectDetectionListLength()):
        obj = perception.ObjectDetectionList(i)
        union = obj.BoundingBox()
        bbox = schema.BoundingBox2d()
        bbox.Init(union.Bytes, union.Pos)
        detections.append(Detection(
            class_id=obj.ClassId(),
            score=obj.Score(),
            bbox=BoundingBox(
                left=bbox.Left(),
                top=bbox.Top(),
                right=bbox.Right(),
                bottom=bbox.Bottom()
            )
        ))

    logger.debug(f"🔍 Decoded {len(detections)} detections from {len(buf)} bytes")
    return detections


def decode_inference_payload(payload: str) -> List[Detection]:
    """Decode the base64 ``O`` field of an inference result"""
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise DecodeError(f"Inference payload is not valid base64: {e}") from e
    return deserialize_object_detection(raw)


def serialize_detections(detections: Sequence[Detection]) -> str:
    """JSON text keyed by 1-based detection index, e.g. {"1":{"C":0,"P":0.5,...}}"""
    indexed = {str(i): detection.to_dict() for i, detection in enumerate(detections, start=1)}
    return json.dumps(indexed, separators=(',', ':'))
