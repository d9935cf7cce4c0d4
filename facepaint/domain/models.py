"""
Domain models/entities
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class ImageSize:
    """Raster size in whole pixels"""
    width: int
    height: int

    @classmethod
    def of(cls, image) -> "ImageSize":
        """Size of a numpy image (rows are height)"""
        height, width = image.shape[:2]
        return cls(width=int(width), height=int(height))


@dataclass(frozen=True)
class ScaleFactors:
    """Original size divided by analysis size, per axis"""
    width_scale: float
    height_scale: float


@dataclass(frozen=True)
class BoundingBox:
    """Face bounding box (normalized 0-1, origin bottom-left, y up)"""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class NormalizedPoint:
    """Landmark point local to a bounding box (0-1, origin bottom-left, y up)"""
    x: float
    y: float


@dataclass(frozen=True)
class MappedPoint:
    """Pixel coordinate in the original image (origin top-left, y down)"""
    x: float
    y: float


@dataclass
class FaceRecord:
    """Primary face reported by a landmark detector"""
    bbox: BoundingBox
    landmarks: Dict[str, Tuple[NormalizedPoint, ...]] = field(default_factory=dict)
    confidence: float = 0.0

    def landmark_group(self, name: str) -> Optional[Tuple[NormalizedPoint, ...]]:
        """Points of a feature, or None when the detector did not report it"""
        return self.landmarks.get(name)


@dataclass(frozen=True)
class Color:
    """Opaque RGB color; overlay transparency is applied at fill time"""
    r: int
    g: int
    b: int

    def to_bgr(self) -> Tuple[int, int, int]:
        return (self.b, self.g, self.r)


@dataclass(frozen=True)
class QuadSegment:
    """Quadratic curve piece from the current pen position"""
    control: MappedPoint
    end: MappedPoint


@dataclass(frozen=True)
class ClosedPolygon:
    """Filled polygon; the last point joins back to the first"""
    points: Tuple[MappedPoint, ...]
    color: Color
    alpha: float


@dataclass(frozen=True)
class OpenSmoothedCurve:
    """Path of quadratic segments anchored at start, filled when drawn"""
    start: MappedPoint
    segments: Tuple[QuadSegment, ...]
    color: Color
    alpha: float


OverlayGeometry = Union[ClosedPolygon, OpenSmoothedCurve]


@dataclass
class OperationResult:
    """Result of an image manipulation call"""
    success: bool
    output_ref: Optional[str] = None
    error_kind: Optional[str] = None
    error: Optional[str] = None
    processing_time_ms: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "success": self.success,
            "output_ref": self.output_ref,
            "error_kind": self.error_kind,
            "error": self.error,
            "processing_time_ms": self.processing_time_ms,
        }


@dataclass
class HealthStatus:
    """Service health status"""
    status: str
    model: str
    version: str

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "model": self.model,
            "version": self.version,
        }
