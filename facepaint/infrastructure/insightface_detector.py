"""
InsightFace implementation of the landmark detector
"""
import time
import logging
from typing import Optional
import numpy as np

from insightface.app import FaceAnalysis

from facepaint.domain.errors import DetectionError
from facepaint.domain.interfaces import LandmarkDetectorInterface
from facepaint.domain.models import FaceRecord, HealthStatus
from facepaint.infrastructure.landmark_convert import face_record_from_pixels
from facepaint.config import get_config

logger = logging.getLogger(__name__)


class InsightFaceDetector(LandmarkDetectorInterface):
    """Landmark detector using InsightFace 106-point landmarks"""

    def __init__(self):
        self.config = get_config()
        self.model: FaceAnalysis = None
        self.is_initialized = False
        self.model_name = self.config.MODEL_NAME
        self._initialize()

    def _initialize(self):
        """Initialize the InsightFace model"""
        try:
            logger.info(f"Initializing InsightFace model: {self.model_name}")

            # Determine providers based on GPU setting
            if self.config.USE_GPU:
                providers = [
                    ('CUDAExecutionProvider', {'device_id': self.config.GPU_ID}),
                    'CPUExecutionProvider'
                ]
            else:
                providers = ['CPUExecutionProvider']

            # Only detection and dense landmarks are needed
            self.model = FaceAnalysis(
                name=self.model_name,
                allowed_modules=['detection', 'landmark_2d_106'],
                providers=providers,
            )

            # Prepare with detection size
            self.model.prepare(
                ctx_id=self.config.GPU_ID if self.config.USE_GPU else -1,
                det_size=(self.config.DET_SIZE, self.config.DET_SIZE),
            )

            self.is_initialized = True
            logger.info(f"InsightFace model initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize InsightFace: {e}")
            self.is_initialized = False
            raise

    def detect(self, image: np.ndarray) -> Optional[FaceRecord]:
        """Detect the first face and its landmark groups"""
        if not self.is_initialized:
            raise DetectionError("Model not initialized")

        start_time = time.time()

        try:
            height, width = image.shape[:2]
            faces = self.model.get(image)
        except Exception as e:
            logger.error(f"Face detection failed: {e}")
            raise DetectionError(f"Error detecting face landmarks: {e}") from e

        processing_time = int((time.time() - start_time) * 1000)

        for face in faces:
            confidence = float(face.det_score) if hasattr(face, 'det_score') else 0.0

            # Filter by minimum confidence
            if confidence < self.config.MIN_CONFIDENCE:
                continue

            logger.info(f"Detected face in {processing_time}ms (score {confidence:.2f})")
            return face_record_from_pixels(
                face.bbox,
                face.get('landmark_2d_106'),
                width,
                height,
                confidence=confidence,
            )

        logger.info(f"No face detected in {processing_time}ms")
        return None

    def get_health(self) -> HealthStatus:
        """Get health status"""
        return HealthStatus(
            status="ok" if self.is_initialized else "error",
            model=self.model_name,
            version="0.7.3",
        )

    def is_ready(self) -> bool:
        """Check if detector is ready"""
        return self.is_initialized
