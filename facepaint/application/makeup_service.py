"""
Makeup service - application layer
"""
import logging
import time
from typing import Callable, Optional, Tuple

import numpy as np

from facepaint.config import get_config
from facepaint.domain.color import parse_hex_color
from facepaint.domain.errors import (
    DetectionError,
    ImageManipulationError,
    LoadError,
    MissingLandmarksError,
    NoFaceFoundError,
)
from facepaint.domain.geometry import build_eyebrow_geometry, build_lip_geometry
from facepaint.domain.interfaces import (
    ImageLoaderInterface,
    LandmarkDetectorInterface,
    OutputWriterInterface,
)
from facepaint.domain.landmarks import LEFT_EYEBROW, OUTER_LIPS, RIGHT_EYEBROW
from facepaint.domain.mapping import map_points
from facepaint.domain.models import (
    FaceRecord,
    HealthStatus,
    ImageSize,
    MappedPoint,
    OperationResult,
    ScaleFactors,
)
from facepaint.infrastructure.compositor import composite
from facepaint.infrastructure.grayscale import to_grayscale
from facepaint.infrastructure.resizer import resize_for_analysis

logger = logging.getLogger(__name__)


class MakeupService:
    """Service for grayscale conversion and landmark driven recoloring"""

    def __init__(
        self,
        detector: LandmarkDetectorInterface,
        image_loader: ImageLoaderInterface,
        output_writer: OutputWriterInterface,
    ):
        self.config = get_config()
        self.detector = detector
        self.image_loader = image_loader
        self.output_writer = output_writer

    def convert_to_grayscale(self, image_ref: str) -> OperationResult:
        """Write a grayscale copy of the image"""
        return self._run("grayscale", lambda: self._grayscale(image_ref))

    def add_lip_color(self, image_ref: str, hex_color: str) -> OperationResult:
        """Fill the outer lip contour with the given color"""
        return self._run("lip color", lambda: self._lip_color(image_ref, hex_color))

    def recolor_eyebrows(self, image_ref: str, hex_color: str) -> OperationResult:
        """Fill each detected eyebrow with the given color"""
        return self._run("eyebrow color", lambda: self._eyebrow_color(image_ref, hex_color))

    def get_health(self) -> HealthStatus:
        """Get service health status"""
        return self.detector.get_health()

    def is_ready(self) -> bool:
        """Check if service is ready"""
        return self.detector.is_ready()

    def _run(self, operation: str, work: Callable[[], str]) -> OperationResult:
        start_time = time.time()
        try:
            output_ref = work()
        except ImageManipulationError as e:
            processing_time = int((time.time() - start_time) * 1000)
            logger.error(f"{operation} failed ({e.kind.value}): {e.message}")
            return OperationResult(
                success=False,
                error_kind=e.kind.value,
                error=e.message,
                processing_time_ms=processing_time,
            )

        processing_time = int((time.time() - start_time) * 1000)
        logger.info(f"{operation} finished in {processing_time}ms: {output_ref}")
        return OperationResult(
            success=True,
            output_ref=output_ref,
            processing_time_ms=processing_time,
        )

    def _load(self, image_ref: str) -> np.ndarray:
        image = self.image_loader.load(image_ref)
        if image is None:
            raise LoadError("Invalid image URL or unable to load image")
        return image

    def _detect(self, image: np.ndarray) -> Tuple[FaceRecord, ImageSize, ScaleFactors]:
        """Run the detector on an analysis sized copy of image"""
        size = self.config.ANALYSIS_SIZE
        resized, scale = resize_for_analysis(image, (size, size))

        try:
            face = self.detector.detect(resized)
        except ImageManipulationError:
            raise
        except Exception as e:
            logger.error(f"Landmark detector raised {type(e).__name__}: {e}")
            raise DetectionError(f"Error detecting face landmarks: {e}") from e

        if face is None:
            raise NoFaceFoundError("No face detected")
        return face, ImageSize.of(resized), scale

    def _mapped_group(
        self,
        face: FaceRecord,
        name: str,
        resized_size: ImageSize,
        scale: ScaleFactors,
    ) -> Optional[Tuple[MappedPoint, ...]]:
        points = face.landmark_group(name)
        if points is None:
            return None
        return map_points(points, face.bbox, resized_size, scale)

    def _grayscale(self, image_ref: str) -> str:
        image = self._load(image_ref)
        return self.output_writer.write(to_grayscale(image))

    def _lip_color(self, image_ref: str, hex_color: str) -> str:
        color = parse_hex_color(hex_color)
        image = self._load(image_ref)
        face, resized_size, scale = self._detect(image)

        lips = self._mapped_group(face, OUTER_LIPS, resized_size, scale)
        if lips is None:
            raise MissingLandmarksError("No lips detected")

        geometry = build_lip_geometry(lips, color, self.config.OVERLAY_ALPHA)
        if geometry is None:
            logger.info(f"Lip contour has {len(lips)} point(s), skipping overlay")

        rendered = composite(image, [geometry], steps=self.config.CURVE_STEPS)
        return self.output_writer.write(rendered)

    def _eyebrow_color(self, image_ref: str, hex_color: str) -> str:
        color = parse_hex_color(hex_color)
        image = self._load(image_ref)
        face, resized_size, scale = self._detect(image)

        geometries = []
        for name in (LEFT_EYEBROW, RIGHT_EYEBROW):
            points = self._mapped_group(face, name, resized_size, scale) or ()
            geometry = build_eyebrow_geometry(points, color, self.config.OVERLAY_ALPHA)
            if geometry is None:
                logger.info(f"{name} has {len(points)} point(s), skipping overlay")
            geometries.append(geometry)

        rendered = composite(image, geometries, steps=self.config.CURVE_STEPS)
        return self.output_writer.write(rendered)
