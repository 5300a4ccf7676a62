import asyncio
import time
import functools
import logging


def time_execution(func):
    """
    Decorator to measure execution time of a function or coroutine.
    Logs the execution time with the function's qualified name.
    """
    logger = logging.getLogger(func.__module__)

    def _log(start_time: float) -> None:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"⏱️ {func.__qualname__} executed in {elapsed_ms:.2f} ms")

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            _log(start_time)

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log(start_time)

    if asyncio.iscoroutinefunction(func):
        return async_wrapper
    return sync_wrapper
