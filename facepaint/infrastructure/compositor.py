"""
Overlay compositor: rasterizes overlay geometry and blends it onto a copy
of the source image
"""
import logging
from typing import Iterable, Optional, Tuple

import cv2
import numpy as np

from facepaint.domain.errors import RenderError
from facepaint.domain.models import ClosedPolygon, OpenSmoothedCurve, OverlayGeometry

logger = logging.getLogger(__name__)

# cv2.fillPoly fixed-point precision
SUBPIXEL_BITS = 4
_SUBPIXEL_SCALE = 1 << SUBPIXEL_BITS

DEFAULT_CURVE_STEPS = 16

# Outlines enclosing less than this (square pixels) are degenerate
MIN_FILL_AREA = 1e-3


def _quadratic_bezier(p0: np.ndarray, control: np.ndarray, end: np.ndarray, steps: int) -> np.ndarray:
    # t = 0 is the previous segment's end, so it is not repeated
    ts = np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)[1:]
    one_minus = 1.0 - ts
    return (
        (one_minus**2)[:, None] * p0
        + (2.0 * one_minus * ts)[:, None] * control
        + (ts**2)[:, None] * end
    )


def flatten_curve(curve: OpenSmoothedCurve, steps: int = DEFAULT_CURVE_STEPS) -> np.ndarray:
    """Sample an open curve into an (N, 2) array of pixel coordinates"""
    current = np.array([curve.start.x, curve.start.y], dtype=np.float64)
    pieces = [current[None, :]]
    for segment in curve.segments:
        control = np.array([segment.control.x, segment.control.y], dtype=np.float64)
        end = np.array([segment.end.x, segment.end.y], dtype=np.float64)
        pieces.append(_quadratic_bezier(current, control, end, steps))
        current = end
    return np.vstack(pieces)


def geometry_outline(geometry: OverlayGeometry, steps: int = DEFAULT_CURVE_STEPS) -> np.ndarray:
    """Outline of a geometry as an (N, 2) float array"""
    if isinstance(geometry, ClosedPolygon):
        return np.array([[p.x, p.y] for p in geometry.points], dtype=np.float64)
    if isinstance(geometry, OpenSmoothedCurve):
        return flatten_curve(geometry, steps)
    raise RenderError(f"Unsupported overlay geometry: {type(geometry).__name__}")


def rasterize(outline: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
    """
    Coverage mask (0-255) of the filled outline.

    The outline is closed implicitly, so an open curve is filled the same
    way a polygon is. An outline without area covers nothing.
    """
    mask = np.zeros(shape, dtype=np.uint8)
    if len(outline) < 3 or cv2.contourArea(outline.astype(np.float32)) < MIN_FILL_AREA:
        return mask
    fixed = np.round(outline * _SUBPIXEL_SCALE).astype(np.int32).reshape(-1, 1, 2)
    cv2.fillPoly(mask, [fixed], 255, lineType=cv2.LINE_AA, shift=SUBPIXEL_BITS)
    return mask


def _as_color(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
    return image.copy()


def _fill(canvas: np.ndarray, geometry: OverlayGeometry, steps: int) -> np.ndarray:
    mask = rasterize(geometry_outline(geometry, steps), canvas.shape[:2])

    coverage = (mask.astype(np.float32) / 255.0)[..., None] * geometry.alpha
    color = np.array(geometry.color.to_bgr(), dtype=np.float32)
    blended = canvas.astype(np.float32) * (1.0 - coverage) + color * coverage
    blended = np.clip(np.rint(blended), 0, 255).astype(np.uint8)

    # Uncovered pixels are taken from the canvas untouched
    return np.where(mask[..., None] > 0, blended, canvas)


def composite(
    base: np.ndarray,
    geometries: Iterable[Optional[OverlayGeometry]],
    steps: int = DEFAULT_CURVE_STEPS,
) -> np.ndarray:
    """
    Draw the base image, then fill each geometry over it in order.

    The base is never modified; a new image of the same size is returned.
    Entries that are None are skipped.
    """
    try:
        canvas = _as_color(base)
        drawn = 0
        for geometry in geometries:
            if geometry is None:
                continue
            canvas = _fill(canvas, geometry, steps)
            drawn += 1
    except (cv2.error, ValueError) as e:
        raise RenderError(f"Failed to composite overlay: {e}") from e

    logger.debug(f"Composited {drawn} overlay(s) onto {base.shape[1]}x{base.shape[0]} image")
    return canvas
