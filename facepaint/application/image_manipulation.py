"""
Asynchronous entry points.

Each call runs the whole pipeline on a worker thread and resolves once,
with either an output reference or a failure category and message.
"""
import asyncio
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional

from facepaint.application.makeup_service import MakeupService
from facepaint.config import get_config
from facepaint.domain.models import OperationResult

logger = logging.getLogger(__name__)


class ImageManipulation:
    """Async facade over MakeupService"""

    def __init__(self, service: MakeupService, executor: Optional[Executor] = None):
        self.service = service
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=get_config().WORKERS,
            thread_name_prefix="facepaint",
        )

    async def convert_to_grayscale(self, image_ref: str) -> OperationResult:
        return await self._dispatch(self.service.convert_to_grayscale, image_ref)

    async def add_lip_color(self, image_ref: str, hex_color: str) -> OperationResult:
        return await self._dispatch(self.service.add_lip_color, image_ref, hex_color)

    async def recolor_eyebrows(self, image_ref: str, hex_color: str) -> OperationResult:
        return await self._dispatch(self.service.recolor_eyebrows, image_ref, hex_color)

    async def _dispatch(self, operation, *args) -> OperationResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, operation, *args)

    def close(self):
        """Shut down the worker pool if this facade created it"""
        if self._owns_executor:
            self.executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
