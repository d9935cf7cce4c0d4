"""
Coordinate mapping from detector space to original image pixels.

The detector reports a bounding box normalized to the analysis image and
landmarks normalized to that box, both with a bottom-left origin and y
growing upward. Rasters use a top-left origin with y growing downward, so
the vertical axis is flipped once for the box and once for the point
inside it. The result is then scaled from the analysis image back to the
original resolution.

Values outside [0, 1] are mapped as given.
"""
from typing import Iterable, Tuple

from .models import BoundingBox, ImageSize, MappedPoint, NormalizedPoint, ScaleFactors


def map_point(
    point: NormalizedPoint,
    bbox: BoundingBox,
    resized_size: ImageSize,
    scale: ScaleFactors,
) -> MappedPoint:
    """Map one box-local point into original image pixels"""
    rw = resized_size.width
    rh = resized_size.height

    # Analysis image pixels
    rx = bbox.x * rw + point.x * bbox.width * rw
    ry = (1 - bbox.y - bbox.height) * rh + (1 - point.y) * bbox.height * rh

    # Original image pixels
    return MappedPoint(x=rx * scale.width_scale, y=ry * scale.height_scale)


def map_points(
    points: Iterable[NormalizedPoint],
    bbox: BoundingBox,
    resized_size: ImageSize,
    scale: ScaleFactors,
) -> Tuple[MappedPoint, ...]:
    """Map a landmark group, keeping its order"""
    return tuple(map_point(p, bbox, resized_size, scale) for p in points)
