"""
Application configuration settings
"""
import os
import tempfile
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration"""
    # Flask
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))

    # InsightFace model settings
    MODEL_NAME = os.getenv("INSIGHTFACE_MODEL", "buffalo_l")  # buffalo_l, buffalo_s, buffalo_sc
    DET_SIZE = int(os.getenv("DET_SIZE", 640))  # Detection size
    MIN_CONFIDENCE = float(os.getenv("MIN_CONFIDENCE", 0.5))  # Min detection confidence

    # Pipeline settings
    ANALYSIS_SIZE = int(os.getenv("ANALYSIS_SIZE", 512))  # Box the detector input is fitted into
    OVERLAY_ALPHA = float(os.getenv("OVERLAY_ALPHA", 0.7))
    CURVE_STEPS = int(os.getenv("CURVE_STEPS", 16))  # Samples per smoothed eyebrow segment

    # Output settings
    JPEG_QUALITY = int(os.getenv("JPEG_QUALITY", 100))
    OUTPUT_DIR = os.getenv("OUTPUT_DIR", tempfile.gettempdir())

    # Image settings
    MAX_IMAGE_SIZE = int(os.getenv("MAX_IMAGE_SIZE", 10 * 1024 * 1024))  # 10MB
    REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", 30))

    # Async worker pool
    WORKERS = int(os.getenv("WORKERS", 4))

    # GPU settings
    USE_GPU = os.getenv("USE_GPU", "false").lower() == "true"
    GPU_ID = int(os.getenv("GPU_ID", 0))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


def get_config():
    """Get configuration based on environment"""
    env = os.getenv("FLASK_ENV", "development")
    if env == "production":
        return ProductionConfig()
    return DevelopmentConfig()
