"""
facepaint - recolor lips and eyebrows using facial landmarks
"""
from facepaint.application.image_manipulation import ImageManipulation
from facepaint.application.makeup_service import MakeupService

__all__ = ["ImageManipulation", "MakeupService"]
__version__ = "0.1.0"
