"""
JPEG output writer
"""
import logging
import uuid
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from facepaint.domain.errors import EncodeError, WriteError
from facepaint.domain.interfaces import OutputWriterInterface
from facepaint.config import get_config

logger = logging.getLogger(__name__)


class JpegOutputWriter(OutputWriterInterface):
    """Writes each image to a new randomly named JPEG file"""

    def __init__(self, output_dir: Optional[str] = None, quality: Optional[int] = None):
        self.config = get_config()
        self.output_dir = Path(output_dir or self.config.OUTPUT_DIR)
        self.quality = self.config.JPEG_QUALITY if quality is None else quality

    def encode(self, image: np.ndarray) -> bytes:
        """Encode image to JPEG bytes"""
        try:
            ok, buffer = cv2.imencode(
                ".jpg",
                image,
                [int(cv2.IMWRITE_JPEG_QUALITY), int(self.quality)],
            )
        except cv2.error as e:
            raise EncodeError(f"Failed to encode image: {e}") from e

        if not ok:
            raise EncodeError("Failed to create image data")
        return buffer.tobytes()

    def write(self, image: np.ndarray) -> str:
        """Encode and store image, returning its file URI"""
        data = self.encode(image)
        path = self.output_dir / f"{uuid.uuid4().hex}.jpg"

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            # "x" refuses to overwrite an existing artifact
            with open(path, "xb") as f:
                f.write(data)
        except OSError as e:
            logger.error(f"Failed to save image to {path}: {e}")
            raise WriteError(f"Failed to save image: {e}") from e

        logger.info(f"Saved {len(data)} bytes to {path}")
        return path.resolve().as_uri()
