"""Translate driver and ORM failures into UpstreamUnavailableError."""
import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from myflix.application.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def translate_db_errors(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except (SQLAlchemyError, OSError, TimeoutError) as exc:
            logger.exception("Database call %s failed", func.__qualname__)
            raise UpstreamUnavailableError("Database unavailable") from exc

    return wrapper
