# app/utils/decorators.py
import inspect
from functools import wraps
from time import perf_counter
from app.core.logging import get_logger

logger = get_logger(__name__)


def log_request(func):
    """
    Logs the start and duration of every call to an endpoint.

    Coroutines get an async wrapper; plain functions get a plain wrapper so
    FastAPI still runs them in its threadpool instead of on the event loop.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = perf_counter()
            logger.debug(f"{func.__name__} started")
            try:
                return await func(*args, **kwargs)
            finally:
                logger.info(f"{func.__name__} finished in {perf_counter() - start_time:.4f}s")

        return async_wrapper

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = perf_counter()
        logger.debug(f"{func.__name__} started")
        try:
            return func(*args, **kwargs)
        finally:
            logger.info(f"{func.__name__} finished in {perf_counter() - start_time:.4f}s")

    return wrapper
