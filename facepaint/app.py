"""
facepaint - landmark driven face recoloring service
Main application entry point
"""
import logging
import sys

from flask import Flask
from flask_cors import CORS

from facepaint.config import get_config
from facepaint.infrastructure.image_loader import ImageLoader
from facepaint.infrastructure.output_writer import JpegOutputWriter
from facepaint.application.makeup_service import MakeupService
from facepaint.api.routes import api, init_routes

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


def create_app(detector=None, image_loader=None, output_writer=None) -> Flask:
    """Application factory"""
    config = get_config()

    # Create Flask app
    app = Flask(__name__)
    app.config['DEBUG'] = config.DEBUG

    # Enable CORS
    CORS(app)

    # Initialize infrastructure
    if detector is None:
        logger.info("Initializing landmark detector...")
        try:
            # InsightFace is an optional extra
            from facepaint.infrastructure.insightface_detector import InsightFaceDetector
            detector = InsightFaceDetector()
        except Exception as e:
            logger.error(f"Failed to initialize detector: {e}")
            raise

    # Initialize application service
    makeup_service = MakeupService(
        detector=detector,
        image_loader=image_loader or ImageLoader(),
        output_writer=output_writer or JpegOutputWriter(),
    )

    # Initialize routes with service
    init_routes(makeup_service)

    # Register blueprint
    app.register_blueprint(api)

    logger.info("Application initialized successfully")
    return app


def main():
    """Main entry point"""
    config = get_config()

    logger.info(f"Starting facepaint on {config.HOST}:{config.PORT}")
    logger.info(f"Model: {config.MODEL_NAME}")
    logger.info(f"GPU enabled: {config.USE_GPU}")
    logger.info(f"Output directory: {config.OUTPUT_DIR}")

    app = create_app()
    app.run(
        host=config.HOST,
        port=config.PORT,
        debug=config.DEBUG,
        threaded=True,
    )


if __name__ == '__main__':
    main()
