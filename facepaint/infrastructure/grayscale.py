"""
Grayscale conversion
"""
import cv2
import numpy as np

from facepaint.domain.errors import RenderError


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """Single channel luminance copy of a BGR or BGRA image"""
    try:
        if image.ndim == 2:
            return image.copy()
        if image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    except cv2.error as e:
        raise RenderError(f"Failed to convert image to grayscale: {e}") from e
