"""
Conversion of pixel-space detector output into FaceRecords
"""
from typing import Dict, Optional, Sequence, Tuple
import numpy as np

from facepaint.domain.landmarks import LANDMARK_GROUPS_106
from facepaint.domain.models import BoundingBox, FaceRecord, NormalizedPoint


def face_record_from_pixels(
    bbox: Sequence[float],
    landmarks: Optional[np.ndarray],
    width: int,
    height: int,
    confidence: float = 0.0,
    groups: Dict[str, Tuple[int, ...]] = LANDMARK_GROUPS_106,
) -> FaceRecord:
    """
    Build a FaceRecord from a pixel bbox (x1, y1, x2, y2) and pixel landmarks.

    Both are given with a top-left origin; the record uses a bottom-left
    origin with the box normalized to the image and points normalized to
    the box.
    """
    x1, y1, x2, y2 = (float(v) for v in bbox)
    box_width = x2 - x1
    box_height = y2 - y1

    record_bbox = BoundingBox(
        x=x1 / width,
        y=1.0 - y2 / height,
        width=box_width / width,
        height=box_height / height,
    )

    groups_found: Dict[str, Tuple[NormalizedPoint, ...]] = {}
    if landmarks is not None and box_width > 0 and box_height > 0:
        for name, indices in groups.items():
            if max(indices) >= len(landmarks):
                continue
            groups_found[name] = tuple(
                NormalizedPoint(
                    x=(float(landmarks[i][0]) - x1) / box_width,
                    y=1.0 - (float(landmarks[i][1]) - y1) / box_height,
                )
                for i in indices
            )

    return FaceRecord(bbox=record_bbox, landmarks=groups_found, confidence=confidence)

