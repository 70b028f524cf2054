# app/utils/decorators.py
import inspect
from functools import wraps
from time import perf_counter
from app.core.logging import get_logger

logger = get_logger(__name__)


def _log_finished(name: str, started_at: float) -> None:
    logger.info(f"Request to endpoint {name} finished in {perf_counter() - started_at:.4f} seconds")


def log_request(func):
    """
    Logs when an endpoint starts and how long it took.

    The wrapper has the same kind as the endpoint: a coroutine endpoint gets
    an `async def` wrapper, a plain `def` endpoint gets a plain wrapper so
    FastAPI still runs it in the threadpool instead of on the event loop.
    """
    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            started_at = perf_counter()
            logger.info(f"Request started for endpoint: {func.__name__}")
            try:
                return await func(*args, **kwargs)
            finally:
                _log_finished(func.__name__, started_at)

        return async_wrapper

    @wraps(func)
    def sync_wrapper(*args, **kwargs):
        started_at = perf_counter()
        logger.info(f"Request started for endpoint: {func.__name__}")
        try:
            return func(*args, **kwargs)
        finally:
            _log_finished(func.__name__, started_at)

    return sync_wrapper
