"""
Failure categories of the manipulation pipeline
"""
from enum import Enum


class ErrorKind(str, Enum):
    LOAD_FAILURE = "LoadFailure"
    RESIZE_FAILURE = "ResizeFailure"
    DETECTION_FAILURE = "DetectionFailure"
    NO_FACE_FOUND = "NoFaceFound"
    MISSING_REQUIRED_LANDMARKS = "MissingRequiredLandmarks"
    RENDER_FAILURE = "RenderFailure"
    ENCODE_FAILURE = "EncodeFailure"
    WRITE_FAILURE = "WriteFailure"


class ImageManipulationError(Exception):
    """Base error; subclasses pin the category reported to callers"""
    kind: ErrorKind = ErrorKind.RENDER_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LoadError(ImageManipulationError):
    kind = ErrorKind.LOAD_FAILURE


class ResizeError(ImageManipulationError):
    kind = ErrorKind.RESIZE_FAILURE


class DetectionError(ImageManipulationError):
    kind = ErrorKind.DETECTION_FAILURE


class NoFaceFoundError(ImageManipulationError):
    kind = ErrorKind.NO_FACE_FOUND


class MissingLandmarksError(ImageManipulationError):
    kind = ErrorKind.MISSING_REQUIRED_LANDMARKS


class RenderError(ImageManipulationError):
    kind = ErrorKind.RENDER_FAILURE


class EncodeError(ImageManipulationError):
    kind = ErrorKind.ENCODE_FAILURE


class WriteError(ImageManipulationError):
    kind = ErrorKind.WRITE_FAILURE
