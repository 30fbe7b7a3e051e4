from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable, Tuple, Type


def log_calls(
    logger_name: str | None = None,
    *,
    level: int = logging.DEBUG,
    expected: Tuple[Type[BaseException], ...] = (),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging calls and results at ``level``.

    Exceptions listed in ``expected`` are part of the function's contract and
    are logged at ``level`` without a traceback; anything else is logged with
    ``logger.exception``. Both are re-raised.
    """

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.log(level, "Calling %s args=%s kwargs=%s", func.__qualname__, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except expected as e:
                logger.log(level, "%s raised %s: %s", func.__qualname__, type(e).__name__, e)
                raise
            except Exception as e:
                logger.exception("Error in %s: %s", func.__qualname__, e)
                raise
            logger.log(level, "%s returned %r", func.__qualname__, result)
            return result

        return _wrapper

    return _decorator


__all__ = ["log_calls"]
