"""Validation pipeline runner."""
import logging
from typing import List, Sequence

from app.core.errors import ApiError
from app.services.pipeline.context import RequestContext
from app.services.pipeline.stages import Stage

logger = logging.getLogger(__name__)


class Pipeline:
    """An ordered chain of stages; the first failing stage ends the run."""

    def __init__(self, operation: str, stages: Sequence[Stage]):
        self.operation = operation
        self.stages: List[Stage] = list(stages)

    async def run(self, context: RequestContext) -> RequestContext:
        """Run every stage in order and return the enriched context."""
        for stage in self.stages:
            try:
                await stage.validate(context)
            except ApiError as e:
                logger.info(
                    f"[PIPELINE] {self.operation} stopped at {stage.name} - "
                    f"{type(e).__name__}: {e.message}"
                )
                raise
        logger.debug(f"[PIPELINE] {self.operation} passed {len(self.stages)} stages")
        return context
