# core/models/detection_models.py
from dataclasses import dataclass
from typing import Any, Dict
import posixpath


@dataclass(frozen=True)
class BoundingBox:
    """2D bounding box in pixel coordinates of the uploaded image"""
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def to_xyxy(self) -> tuple:
        """Convert to (x1, y1, x2, y2) format"""
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class Detection:
    """One object decoded from an inference payload"""
    class_id: int
    score: float
    bbox: BoundingBox

    def to_dict(self) -> Dict[str, Any]:
        # Key names are the wire format read by the viewer front-end
        return {
            'C': self.class_id,
            'P': self.score,
            'X': self.bbox.left,
            'Y': self.bbox.top,
            'x': self.bbox.right,
            'y': self.bbox.bottom
        }


@dataclass(frozen=True)
class QueryWindow:
    """Minute-granularity bounds sent to the image listing"""
    start_time: str
    end_time: str


@dataclass
class ImageRecord:
    """Image entry returned by the Console image listing"""
    name: str
    contents: str  # base64

    @property
    def timestamp(self) -> str:
        """Filename without its extension, e.g. 20230126052344873"""
        return posixpath.splitext(self.name)[0]

    @property
    def extension(self) -> str:
        return posixpath.splitext(self.name)[1].lstrip('.').lower() or 'jpg'

    @property
    def data_uri(self) -> str:
        return f"data:image/{self.extension};base64,{self.contents}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ImageRecord':
        return cls(name=str(data['name']), contents=str(data.get('contents') or ''))


@dataclass
class OutputRecord:
    """Image paired with its serialized detections"""
    image: str
    inference_data: str
    timestamp: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'image': self.image,
            'inferenceData': self.inference_data,
            'timestamp': self.timestamp
        }
