from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import cv2
import numpy as np
import pytest

from facepaint.application.makeup_service import MakeupService
from facepaint.domain.errors import DetectionError
from facepaint.domain.interfaces import ImageLoaderInterface, LandmarkDetectorInterface
from facepaint.domain.landmarks import LEFT_EYEBROW, OUTER_LIPS, RIGHT_EYEBROW
from facepaint.domain.models import BoundingBox, FaceRecord, HealthStatus, NormalizedPoint
from facepaint.infrastructure.output_writer import JpegOutputWriter

IMAGE_REF = "file:///photos/portrait.jpg"

FACE_BBOX = BoundingBox(x=0.25, y=0.2, width=0.5, height=0.6)

LIP_POINTS = (
    NormalizedPoint(0.35, 0.25),
    NormalizedPoint(0.42, 0.29),
    NormalizedPoint(0.5, 0.3),
    NormalizedPoint(0.58, 0.29),
    NormalizedPoint(0.65, 0.25),
    NormalizedPoint(0.58, 0.18),
    NormalizedPoint(0.5, 0.16),
    NormalizedPoint(0.42, 0.18),
)

LEFT_EYEBROW_POINTS = (
    NormalizedPoint(0.15, 0.78),
    NormalizedPoint(0.25, 0.9),
    NormalizedPoint(0.35, 0.92),
    NormalizedPoint(0.42, 0.8),
)

RIGHT_EYEBROW_POINTS = tuple(NormalizedPoint(1.0 - p.x, p.y) for p in reversed(LEFT_EYEBROW_POINTS))


def make_face(**groups) -> FaceRecord:
    landmarks = {
        OUTER_LIPS: LIP_POINTS,
        LEFT_EYEBROW: LEFT_EYEBROW_POINTS,
        RIGHT_EYEBROW: RIGHT_EYEBROW_POINTS,
    }
    for name, points in groups.items():
        if points is None:
            landmarks.pop(name, None)
        else:
            landmarks[name] = tuple(points)
    return FaceRecord(bbox=FACE_BBOX, landmarks=landmarks, confidence=0.99)


def read_output(output_ref: str) -> np.ndarray:
    """Decode a written artifact back into a BGR array"""
    path = Path(url2pathname(urlparse(output_ref).path))
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    assert image is not None, f"could not read {path}"
    return image


class FakeDetector(LandmarkDetectorInterface):
    """Returns a fixed face and remembers what it was shown"""

    def __init__(self, face: Optional[FaceRecord] = None, error: Optional[Exception] = None):
        self.face = face
        self.error = error
        self.seen_shapes = []

    def detect(self, image):
        self.seen_shapes.append(image.shape)
        if self.error is not None:
            raise self.error
        return self.face

    def get_health(self):
        return HealthStatus(status="ok", model="fake", version="test")

    def is_ready(self):
        return True


class FakeLoader(ImageLoaderInterface):
    """Serves in-memory images by reference"""

    def __init__(self, images):
        self.images = images

    def load(self, image_ref):
        image = self.images.get(image_ref)
        return None if image is None else image.copy()

    def load_from_url(self, url):
        return self.load(url)

    def load_from_bytes(self, data):
        return None


@pytest.fixture
def portrait() -> np.ndarray:
    """640x480 flat skin-toned face on a gray background"""
    image = np.full((480, 640, 3), 120, dtype=np.uint8)
    cv2.ellipse(image, (320, 240), (170, 220), 0, 0, 360, (150, 180, 215), -1)
    return image


@pytest.fixture
def output_dir(tmp_path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def writer(output_dir) -> JpegOutputWriter:
    return JpegOutputWriter(output_dir=str(output_dir), quality=100)


@pytest.fixture
def detector() -> FakeDetector:
    return FakeDetector(face=make_face())


@pytest.fixture
def service(portrait, detector, writer) -> MakeupService:
    return MakeupService(
        detector=detector,
        image_loader=FakeLoader({IMAGE_REF: portrait}),
        output_writer=writer,
    )


@pytest.fixture
def failing_detector() -> FakeDetector:
    return FakeDetector(error=DetectionError("backend crashed"))
