"""Deprecation helpers.

Renamed lookup APIs keep working under their old names for at least two
minor versions; each call emits a DeprecationWarning that names the
release removing the alias and its replacement.

Python 3.13+.
"""

import functools
import warnings
from collections.abc import Callable
from typing import ParamSpec, TypeVar

__all__ = [
    "deprecated",
    "warn_deprecated",
]

P = ParamSpec("P")
R = TypeVar("R")


def warn_deprecated(
    feature: str,
    *,
    removal_version: str,
    alternative: str | None = None,
    stacklevel: int = 2,
) -> None:
    """Emit a DeprecationWarning for feature.

    Example:
        >>> warn_deprecated(
        ...     "known_currencies()",
        ...     removal_version="2.0.0",
        ...     alternative="known_currency_codes()",
        ... )
        # DeprecationWarning: known_currencies() is deprecated and will be
        # removed in version 2.0.0. Use known_currency_codes() instead.
    """
    parts = [f"{feature} is deprecated and will be removed in version {removal_version}."]
    if alternative:
        parts.append(f"Use {alternative} instead.")
    warnings.warn(" ".join(parts), DeprecationWarning, stacklevel=stacklevel)


def deprecated(
    *,
    removal_version: str,
    alternative: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorate a function so every call warns, and note it in the docstring."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            # 3 = warn_deprecated -> wrapper -> caller
            warn_deprecated(
                f"{func.__qualname__}()",
                removal_version=removal_version,
                alternative=alternative,
                stacklevel=3,
            )
            return func(*args, **kwargs)

        note = f".. deprecated::\n    Will be removed in version {removal_version}."
        if alternative:
            note += f"\n    Use :func:`{alternative}` instead."
        wrapper.__doc__ = f"{func.__doc__.rstrip()}\n\n{note}" if func.__doc__ else note
        return wrapper

    return decorator
