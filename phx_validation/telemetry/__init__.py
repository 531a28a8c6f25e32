# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry package - metric instruments for escalated validation failures."""

from .metrics import requirement_failure_total

__all__ = ["requirement_failure_total"]
