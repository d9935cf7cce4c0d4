"""
Analysis resizer: fits the source image into the detector's input box
"""
import logging
from typing import Tuple

import cv2
import numpy as np

from facepaint.domain.errors import ResizeError
from facepaint.domain.models import ScaleFactors

logger = logging.getLogger(__name__)


def analysis_scale(width: int, height: int, target: Tuple[int, int]) -> float:
    """Largest scale that keeps the image inside the target box"""
    target_width, target_height = target
    return min(target_width / width, target_height / height)


def resize_for_analysis(
    image: np.ndarray,
    target: Tuple[int, int] = (512, 512),
) -> Tuple[np.ndarray, ScaleFactors]:
    """
    Resize an image to fit the target box, keeping its aspect ratio.

    Returns the resized copy and the factors that map its pixel
    coordinates back onto the source image.
    """
    if image is None or getattr(image, "ndim", 0) < 2:
        raise ResizeError("Source is not an image")

    height, width = image.shape[:2]
    if width == 0 or height == 0:
        raise ResizeError(f"Degenerate source size {width}x{height}")

    scale = analysis_scale(width, height, target)
    new_width = max(1, int(round(width * scale)))
    new_height = max(1, int(round(height * scale)))

    interpolation = cv2.INTER_AREA if scale < 1 else cv2.INTER_LINEAR
    try:
        resized = cv2.resize(image, (new_width, new_height), interpolation=interpolation)
    except cv2.error as e:
        raise ResizeError(f"Failed to resize image: {e}") from e

    logger.debug(f"Resized {width}x{height} to {new_width}x{new_height} for analysis")

    return resized, ScaleFactors(
        width_scale=width / new_width,
        height_scale=height / new_height,
    )
