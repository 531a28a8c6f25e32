# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Values are read on every call so a process can toggle them without reloading
the package.
"""

from __future__ import annotations

import os

METRICS_ENV = "PHX_VALIDATION_METRICS"

_FALSY = ("", "0", "false", "no")


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in _FALSY


def metrics_enabled() -> bool:
    """Return whether escalated failures are counted (``PHX_VALIDATION_METRICS``)."""

    return _flag(METRICS_ENV, "1")


__all__ = ["METRICS_ENV", "metrics_enabled"]
