# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Boolean escalation of validation results."""

from __future__ import annotations

from .result import ValidationResult


def that(result: ValidationResult) -> bool:
    """Return ``True`` if *result* is a success. Never raises."""

    return result.is_success


__all__ = ["that"]
