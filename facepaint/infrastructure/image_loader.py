"""
Image loader implementation
"""
import logging
from typing import Optional
from io import BytesIO
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

import numpy as np
import cv2
import requests
from PIL import Image

from facepaint.domain.interfaces import ImageLoaderInterface
from facepaint.config import get_config

logger = logging.getLogger(__name__)


class ImageLoader(ImageLoaderInterface):
    """Image loader for URLs, file URIs and local paths"""

    def __init__(self):
        self.config = get_config()
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'facepaint/1.0'
        })

    def load(self, image_ref: str) -> Optional[np.ndarray]:
        """Load image from a URL, file URI or path"""
        if not image_ref:
            logger.error("Empty image reference")
            return None

        scheme = urlparse(image_ref).scheme.lower()
        if scheme in ('http', 'https'):
            return self.load_from_url(image_ref)
        if scheme == 'file':
            return self.load_from_path(url2pathname(urlparse(image_ref).path))
        return self.load_from_path(image_ref)

    def load_from_url(self, url: str) -> Optional[np.ndarray]:
        """Load image from URL"""
        try:
            logger.info(f"Loading image from URL: {url[:100]}...")

            response = self.session.get(
                url,
                timeout=self.config.REQUEST_TIMEOUT,
                stream=True,
            )
            response.raise_for_status()

            # Check content type
            content_type = response.headers.get('Content-Type', '')
            if not any(mt in content_type for mt in ['image/', 'octet-stream']):
                logger.warning(f"Unexpected content type: {content_type}")

            # Check size
            content_length = int(response.headers.get('Content-Length', 0))
            if content_length > self.config.MAX_IMAGE_SIZE:
                logger.error(f"Image too large: {content_length} bytes")
                return None

            # Read and decode image
            image_data = response.content
            return self._decode_image(image_data)

        except requests.RequestException as e:
            logger.error(f"Failed to download image: {e}")
            return None
        except Exception as e:
            logger.error(f"Failed to load image from URL: {e}")
            return None

    def load_from_path(self, path: str) -> Optional[np.ndarray]:
        """Load image from a local file"""
        try:
            logger.info(f"Loading image from path: {path}")
            return self.load_from_bytes(Path(path).read_bytes())

        except OSError as e:
            logger.error(f"Failed to read image file: {e}")
            return None

    def load_from_bytes(self, data: bytes) -> Optional[np.ndarray]:
        """Load image from bytes"""
        try:
            if len(data) > self.config.MAX_IMAGE_SIZE:
                logger.error(f"Image too large: {len(data)} bytes")
                return None

            return self._decode_image(data)

        except Exception as e:
            logger.error(f"Failed to load image from bytes: {e}")
            return None

    def _decode_image(self, data: bytes) -> Optional[np.ndarray]:
        """Decode image bytes to numpy array"""
        try:
            # Try PIL first (better format support)
            pil_image = Image.open(BytesIO(data))

            # Convert to RGB if needed
            if pil_image.mode != 'RGB':
                pil_image = pil_image.convert('RGB')

            # Convert to numpy array (RGB format)
            image = np.array(pil_image)

            # Convert RGB to BGR for OpenCV
            image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)

            return image

        except Exception as e:
            logger.warning(f"PIL failed, trying OpenCV: {e}")

            # Fallback to OpenCV
            try:
                nparr = np.frombuffer(data, np.uint8)
                image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)

                if image is None:
                    logger.error("OpenCV failed to decode image")
                    return None

                return image

            except Exception as e2:
                logger.error(f"OpenCV also failed: {e2}")
                return None
