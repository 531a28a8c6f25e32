# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""phx_validation - validation results, predicate checks and escalation.

.. code-block:: python

    from phx_validation import check, require, validations

    def set_limit(limit):
        require.that_argument("limit", validations.is_in_range(limit, 1, 1000))

    if check.that(validations.is_not_blank(name)):
        ...
"""

from . import check, require, validations
from .exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    PhxValidationError,
    RequirementError,
    ValidationError,
)
from .result import FailureResult, SuccessResult, ValidationResult

__all__ = [
    "check",
    "require",
    "validations",
    "ValidationResult",
    "SuccessResult",
    "FailureResult",
    "PhxValidationError",
    "ValidationError",
    "RequirementError",
    "InvalidArgumentError",
    "InvalidStateError",
]
