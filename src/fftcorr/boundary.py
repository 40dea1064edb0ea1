"""Pipeline boundary - where correlation failures are consumed.

Runs black-box pipeline stages (transform, spectral multiply, peak
detection), turns their CorrelationError failures into Err results and
logs them. Stages are chained fail-fast: the first failure ends the run.
"""

import asyncio
import functools
import threading
from typing import Any, Callable, Sequence, TypeVar

from fftcorr.config import ErrorReportingConfig
from fftcorr.errors import CorrelationError
from fftcorr.result import Err, Ok, Result, attempt
from fftcorr.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Stage = tuple[str, Callable[[Any], Any]]


class PipelineBoundary:
    """Runs pipeline stages and reports their failures."""
    
    def __init__(self, settings: ErrorReportingConfig | None = None) -> None:
        self.settings = settings or ErrorReportingConfig()
        self._failures = 0
        self._lock = threading.Lock()
    
    @property
    def failures(self) -> int:
        """Number of failures reported so far."""
        return self._failures
    
    def call(self, stage: str, func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
        """Run one stage and return its Result.
        
        Only CorrelationError is captured; anything else propagates.
        """
        result = attempt(func, *args, **kwargs)
        if isinstance(result, Err):
            self.report(stage, result.error)
        return result
    
    def run(self, stages: Sequence[Stage], value: Any) -> Result[Any]:
        """Feed value through stages in order, stopping at the first failure.
        
        Args:
            stages: (name, func) pairs; each func receives the previous output
            value: Input to the first stage
            
        Returns:
            Ok with the last stage's output, or the Err of the failed stage
        """
        result: Result[Any] = Ok(value)
        for name, func in stages:
            logger.debug(f"Running stage {name}")
            result = self.call(name, func, result.value)
            if isinstance(result, Err):
                return result
        return result
    
    async def acall(self, stage: str, func: Callable[..., T], *args: Any) -> Result[T]:
        """Run one stage in a worker thread without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(self.call, stage, func, *args)
        )
    
    def report(self, stage: str, error: CorrelationError) -> None:
        """Log a stage failure."""
        with self._lock:
            self._failures += 1
        
        exc_info = error if self.settings.log_tracebacks else None
        logger.error(f"{stage} failed: {error}", exc_info=exc_info)
