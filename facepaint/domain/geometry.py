"""
Overlay geometry built from mapped landmark points
"""
from typing import Optional, Sequence

from .models import ClosedPolygon, Color, MappedPoint, OpenSmoothedCurve, QuadSegment

DEFAULT_OVERLAY_ALPHA = 0.7

# Fewer points than this draws nothing
MIN_POINTS = 2


def midpoint(a: MappedPoint, b: MappedPoint) -> MappedPoint:
    return MappedPoint(x=(a.x + b.x) / 2.0, y=(a.y + b.y) / 2.0)


def build_lip_geometry(
    points: Sequence[MappedPoint],
    color: Color,
    alpha: float = DEFAULT_OVERLAY_ALPHA,
) -> Optional[ClosedPolygon]:
    """Closed polygon through the lip contour in detector order"""
    if len(points) < MIN_POINTS:
        return None
    return ClosedPolygon(points=tuple(points), color=color, alpha=alpha)


def build_eyebrow_geometry(
    points: Sequence[MappedPoint],
    color: Color,
    alpha: float = DEFAULT_OVERLAY_ALPHA,
) -> Optional[OpenSmoothedCurve]:
    """
    Smoothed open path along an eyebrow.

    Each segment bends toward the previous raw landmark and stops halfway
    to the current one, so the path follows a running average of the
    landmarks instead of passing through them.
    """
    if len(points) < MIN_POINTS:
        return None

    segments = tuple(
        QuadSegment(control=prev, end=midpoint(prev, curr))
        for prev, curr in zip(points, points[1:])
    )
    return OpenSmoothedCurve(start=points[0], segments=segments, color=color, alpha=alpha)
