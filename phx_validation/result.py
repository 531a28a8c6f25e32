# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation result data structures.

A :class:`ValidationResult` is either the shared :class:`SuccessResult` or a
:class:`FailureResult` carrying the exception that describes the failure. The
variant set is closed: no other subclass can be declared, so consumers match
over exactly these two.

.. code-block:: python

    match result:
        case SuccessResult():
            ...
        case FailureResult(cause=cause):
            ...
        case _:
            assert_never(result)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .exceptions import ValidationError

_SEALED = False


class ValidationResult:
    """The outcome of a single validation."""

    __slots__ = ()

    is_success: ClassVar[bool]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if _SEALED:
            raise TypeError(
                f"ValidationResult is closed to extension; cannot subclass it as '{cls.__qualname__}'"
            )

    def __new__(cls, *args, **kwargs):
        if cls is ValidationResult:
            raise TypeError(
                "ValidationResult cannot be instantiated directly; use success() or failure()"
            )
        return super().__new__(cls)

    def __bool__(self) -> bool:
        return self.is_success

    @staticmethod
    def success() -> "SuccessResult":
        """Return the successful result."""

        return _SUCCESS

    @staticmethod
    def failure(cause: Union[str, BaseException]) -> "FailureResult":
        """Return a failed result.

        A message is wrapped in a :class:`ValidationError`; an exception is kept
        as the cause unchanged so an existing chain is preserved.
        """

        if isinstance(cause, BaseException):
            return FailureResult(cause)
        return FailureResult(ValidationError(str(cause)))


@dataclass(frozen=True)
class SuccessResult(ValidationResult):
    """A successful validation. All instances are interchangeable."""

    __slots__ = ()

    is_success: ClassVar[bool] = True


@dataclass(frozen=True)
class FailureResult(ValidationResult):
    """A failed validation and the exception describing why."""

    __slots__ = ("cause",)

    cause: BaseException

    is_success: ClassVar[bool] = False

    @property
    def message(self) -> str:
        return str(self.cause)


_SUCCESS = SuccessResult()
_SEALED = True


__all__ = ["ValidationResult", "SuccessResult", "FailureResult"]
