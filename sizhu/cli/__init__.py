"""Sizhu command line interface package."""

from __future__ import annotations

from ._runner import build_command, console_main, main
from .app import app

__all__ = ["app", "main", "build_command", "console_main"]
