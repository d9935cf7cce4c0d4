"""
Domain interfaces (ports)
"""
from abc import ABC, abstractmethod
from typing import Optional
import numpy as np

from .models import FaceRecord, HealthStatus


class LandmarkDetectorInterface(ABC):
    """Interface for facial landmark detection"""

    @abstractmethod
    def detect(self, image: np.ndarray) -> Optional[FaceRecord]:
        """Return the first detected face, or None when there is none"""
        pass

    @abstractmethod
    def get_health(self) -> HealthStatus:
        """Get service health status"""
        pass

    @abstractmethod
    def is_ready(self) -> bool:
        """Check if the detector is ready"""
        pass


class ImageLoaderInterface(ABC):
    """Interface for image loading"""

    @abstractmethod
    def load(self, image_ref: str) -> Optional[np.ndarray]:
        """Load image from a URL, file URI or path"""
        pass

    @abstractmethod
    def load_from_url(self, url: str) -> Optional[np.ndarray]:
        """Load image from URL"""
        pass

    @abstractmethod
    def load_from_bytes(self, data: bytes) -> Optional[np.ndarray]:
        """Load image from bytes"""
        pass


class OutputWriterInterface(ABC):
    """Interface for storing rendered images"""

    @abstractmethod
    def write(self, image: np.ndarray) -> str:
        """Encode and store an image, returning a reference to it"""
        pass
