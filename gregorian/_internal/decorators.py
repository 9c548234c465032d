"""Deprecation support for renamed gregorian methods.

Methods that were renamed keep their old name as a thin alias that
warns and forwards to the new one. Month.wrapping_next() and
Month.wrapping_prev() are the aliases of Month.next() and Month.prev().

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import warnings
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")


def deprecated(replacement: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Mark a method as a deprecated alias of ``replacement``.

    Calling the alias emits a DeprecationWarning naming the method to
    use instead, attributed to the caller's line.

    Args:
        replacement: Qualified name of the method that replaces the
            alias, like ``"Month.next"``.

    Returns:
        A decorator. The wrapped function gets a ``__deprecated__``
        attribute holding the warning text, as ``warnings.deprecated``
        does on newer Pythons.

    Examples:
        >>> from gregorian import Month
        >>> Month.wrapping_next.__deprecated__
        'Month.wrapping_next() is deprecated, use Month.next() instead'
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        message = f"{func.__qualname__}() is deprecated, use {replacement}() instead"

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            warnings.warn(message, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        wrapper.__deprecated__ = message  # type: ignore[attr-defined]
        return wrapper

    return decorator


__all__ = [
    "deprecated",
]
