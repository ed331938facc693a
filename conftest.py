"""Pytest configuration for Sizhu."""

from __future__ import annotations

import os

# Hypothesis runs deterministic, CI-sized example counts unless overridden.
try:
    from hypothesis import settings as _hypothesis_settings
except ImportError:  # pragma: no cover - hypothesis optional
    pass
else:
    _hypothesis_settings.register_profile("sizhu", max_examples=200, derandomize=True)
    _hypothesis_settings.load_profile(os.environ.get("SIZHU_HYPOTHESIS_PROFILE", "sizhu"))
