# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for phx_validation."""

from __future__ import annotations

from typing import Optional


class PhxValidationError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PhxValidationError):
    """Describes why a check failed when no underlying exception exists."""


class RequirementError(PhxValidationError):
    """Raised when a failed validation result is escalated.

    ``cause`` is the exception attached to the failed result. It is also set as
    ``__cause__`` by the raising site so tracebacks show the chain.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class InvalidArgumentError(RequirementError, ValueError):
    """A caller supplied an invalid argument."""

    def __init__(self, argument_name: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.argument_name = argument_name


class InvalidStateError(RequirementError, RuntimeError):
    """A value derived internally violated an invariant."""


__all__ = [
    "PhxValidationError",
    "ValidationError",
    "RequirementError",
    "InvalidArgumentError",
    "InvalidStateError",
]
