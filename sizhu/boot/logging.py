"""Logging helpers for the Sizhu CLI and embedding applications."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["LOG_LEVEL_ENV", "coerce_level", "resolve_level", "configure_logging"]

LOG_LEVEL_ENV = "SIZHU_LOG_LEVEL"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def coerce_level(value: str | int | None) -> int:
    """Return a logging level derived from ``value``.

    Accepts standard ``logging`` level names (case insensitive) or a numeric
    level. Invalid inputs fall back to :data:`logging.INFO`.
    """

    if value is None:
        return logging.INFO

    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        return logging.INFO

    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    if isinstance(resolved, int):
        return resolved

    return logging.INFO


def resolve_level(level: str | int | None = None, *, default: str | int | None = None) -> int:
    """Pick the effective level for the CLI and embedding applications.

    An explicit ``level`` wins, then ``SIZHU_LOG_LEVEL``, then ``default``
    (normally the ``logging.level`` entry of the settings file). Blank values
    are skipped. With nothing set the result is :data:`logging.INFO`.
    """

    for candidate in (level, os.environ.get(LOG_LEVEL_ENV), default):
        if candidate is None:
            continue
        if isinstance(candidate, str) and not candidate.strip():
            continue
        return coerce_level(candidate)
    return logging.INFO


def configure_logging(
    *,
    level: str | int | None = None,
    default: str | int | None = None,
    **kwargs: Any,
) -> int:
    """Configure the root logger and return the level applied.

    The level is chosen by :func:`resolve_level`. ``kwargs`` are forwarded to
    :func:`logging.basicConfig`; the root handlers are replaced unless
    ``force=False`` is passed.
    """

    effective_level = resolve_level(level, default=default)

    logging.basicConfig(
        level=effective_level,
        format=kwargs.pop("format", _DEFAULT_FORMAT),
        datefmt=kwargs.pop("datefmt", _DEFAULT_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )
    logging.getLogger(__name__).debug(
        "root logger set to %s", logging.getLevelName(effective_level)
    )

    return effective_level
