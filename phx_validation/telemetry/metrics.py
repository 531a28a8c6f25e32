# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for phx_validation."""

from __future__ import annotations

from .runtime import meter

requirement_failure_total = meter.create_counter(
    name="phx.validation.requirement.failure.total",
    description="Counts failed validation results escalated by require, tagged by kind.",
    unit="1",
)


__all__ = ["requirement_failure_total"]
