"""
Decorators shared by all image operations.
"""

import functools
import logging
import time
from typing import Callable, TypeVar

from pixelflow.core.exceptions import ImageProcessError, PixelFlowError
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.converters import require_buffer

F = TypeVar("F", bound=Callable)


def image_operation(name: str) -> Callable[[F], F]:
    """
    Wrap an operation taking a source buffer as its first argument.

    The wrapper:
    - rejects a missing or non-PixelBuffer source with InvalidArgumentError
    - logs the call at DEBUG and the outcome (dimensions, timing) at INFO
    - re-raises pixelflow errors unchanged
    - wraps any other failure in ImageProcessError with the operation name
      and source dimensions

    Args:
        name: Operation name used in logs and errors

    Example:
        >>> @image_operation("blur")
        ... def blur(source, radius): ...
    """

    def decorator(func: F) -> F:
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(source, *args, **kwargs):
            require_buffer(source, name)
            width, height = source.width, source.height
            logger.debug(
                f"{name}: {width}x{height} {source.pixel_format.value} "
                f"args={args} kwargs={kwargs}"
            )

            start = time.perf_counter()
            try:
                result = func(source, *args, **kwargs)
            except PixelFlowError:
                raise
            except Exception as e:
                logger.error(f"Failed to {name} image {width}x{height}: {e}", exc_info=True)
                raise ImageProcessError(
                    f"Failed to {name} image {width}x{height}: {e}", name, width, height
                ) from e

            elapsed_ms = (time.perf_counter() - start) * 1000
            if isinstance(result, PixelBuffer):
                if result is source:
                    logger.debug(f"{name}: no-op, returning source image")
                else:
                    logger.info(
                        f"Successfully applied {name}: {width}x{height} -> "
                        f"{result.width}x{result.height} ({elapsed_ms:.1f} ms)"
                    )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def timer(func: F) -> F:
    """Log the execution time of a function at DEBUG level."""
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"{func.__qualname__} took {elapsed_ms:.1f} ms")

    return wrapper  # type: ignore[return-value]
