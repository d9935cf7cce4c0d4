"""
API routes/handlers
"""
import logging
from flask import Blueprint, request, jsonify

from facepaint.application.makeup_service import MakeupService
from facepaint.domain.errors import ErrorKind
from facepaint.domain.models import OperationResult

logger = logging.getLogger(__name__)

# Create blueprint
api = Blueprint('api', __name__)

# Service instance (injected)
makeup_service: MakeupService = None

STATUS_BY_KIND = {
    ErrorKind.LOAD_FAILURE.value: 400,
    ErrorKind.NO_FACE_FOUND.value: 422,
    ErrorKind.MISSING_REQUIRED_LANDMARKS.value: 422,
}


def init_routes(service: MakeupService):
    """Initialize routes with service dependency"""
    global makeup_service
    makeup_service = service


def _error(message: str, status: int):
    return jsonify({
        "success": False,
        "output_ref": None,
        "error_kind": None,
        "error": message,
    }), status


def _respond(result: OperationResult):
    if not result.success:
        return jsonify(result.to_dict()), STATUS_BY_KIND.get(result.error_kind, 500)
    return jsonify(result.to_dict())


def _read_body(*fields):
    data = request.get_json(silent=True)
    if not data:
        return None, "Missing JSON request body"
    for name in fields:
        if not data.get(name):
            return None, f"Missing {name} in request body"
    return data, None


@api.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    status = makeup_service.get_health()
    return jsonify(status.to_dict())


@api.route('/ready', methods=['GET'])
def ready():
    """Readiness check endpoint"""
    is_ready = makeup_service.is_ready()
    if is_ready:
        return jsonify({"ready": True})
    return jsonify({"ready": False}), 503


@api.route('/grayscale', methods=['POST'])
def grayscale():
    """Convert an image to grayscale"""
    data, error = _read_body('image_ref')
    if error:
        return _error(error, 400)

    return _respond(makeup_service.convert_to_grayscale(data['image_ref']))


@api.route('/lip-color', methods=['POST'])
def lip_color():
    """Color the lips of the first detected face"""
    if not makeup_service.is_ready():
        return _error("Service not ready", 503)

    data, error = _read_body('image_ref', 'color')
    if error:
        return _error(error, 400)

    return _respond(makeup_service.add_lip_color(data['image_ref'], data['color']))


@api.route('/eyebrow-color', methods=['POST'])
def eyebrow_color():
    """Color the eyebrows of the first detected face"""
    if not makeup_service.is_ready():
        return _error("Service not ready", 503)

    data, error = _read_body('image_ref', 'color')
    if error:
        return _error(error, 400)

    return _respond(makeup_service.recolor_eyebrows(data['image_ref'], data['color']))
