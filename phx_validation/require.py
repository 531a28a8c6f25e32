# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Escalation of failed validation results into exceptions.

``that_argument`` is for values a caller handed in and raises
:class:`~phx_validation.exceptions.InvalidArgumentError`; ``that_value`` is for
values the code derived itself and raises
:class:`~phx_validation.exceptions.InvalidStateError`. Both attach the failure's
cause to the raised error and chain it as ``__cause__``.

The failure message can be given three ways:

.. code-block:: python

    from phx_validation import require, validations

    # Option 1: the default message
    require.that_argument("limit", validations.is_not_zero(limit))

    # Option 2: a template receiving the argument name as {0} or {name}
    require.that_argument("limit", validations.is_not_zero(limit), "'{name}' must not be 0.")

    # Option 3: a callable, only invoked when the validation failed
    require.that_argument("limit", validations.is_not_zero(limit), lambda name: expensive(name))
    require.that_value(validations.is_not_none(row), lambda: f"Row {key} vanished.")
"""

from __future__ import annotations

import logging
from typing import Callable, Union, assert_never

from .config import metrics_enabled
from .exceptions import InvalidArgumentError, InvalidStateError
from .result import FailureResult, SuccessResult, ValidationResult
from .telemetry import requirement_failure_total

logger = logging.getLogger(__name__)

DEFAULT_ARGUMENT_MESSAGE = "Argument '{0}' is invalid."
DEFAULT_VALUE_MESSAGE = "Value is invalid."

ArgumentMessage = Union[str, Callable[[str], str]]
ValueMessage = Union[str, Callable[[], str]]


def _record_failure(kind: str) -> None:
    if metrics_enabled():
        requirement_failure_total.add(1, {"kind": kind})


def that_argument(
    argument_name: str,
    result: ValidationResult,
    message: ArgumentMessage = DEFAULT_ARGUMENT_MESSAGE,
) -> None:
    """Raise :class:`InvalidArgumentError` if validation of an argument failed.

    :param argument_name: Name of the argument that was validated.
    :param result: The validation result to evaluate.
    :param message: Message for the failure. A string is a ``str.format``
                    template receiving *argument_name* as ``{0}`` and ``{name}``;
                    a callable receives *argument_name* and returns the message.
                    Neither is touched when *result* is a success.
    :raises InvalidArgumentError: when *result* is a failure.
    """

    match result:
        case SuccessResult():
            return
        case FailureResult(cause=cause):
            if callable(message):
                text = message(argument_name)
            else:
                text = message.format(argument_name, name=argument_name)
            logger.debug("Requirement on argument '%s' failed: %s", argument_name, cause)
            _record_failure("argument")
            raise InvalidArgumentError(argument_name, text, cause) from cause
        case _:
            assert_never(result)


def that_value(
    result: ValidationResult,
    message: ValueMessage = DEFAULT_VALUE_MESSAGE,
) -> None:
    """Raise :class:`InvalidStateError` if validation of a derived value failed.

    :param result: The validation result to evaluate.
    :param message: Message for the failure, used verbatim, or a zero-argument
                    callable producing it. The callable is only invoked when
                    *result* is a failure.
    :raises InvalidStateError: when *result* is a failure.
    """

    match result:
        case SuccessResult():
            return
        case FailureResult(cause=cause):
            text = message() if callable(message) else message
            logger.debug("Requirement on value failed: %s", cause)
            _record_failure("value")
            raise InvalidStateError(text, cause) from cause
        case _:
            assert_never(result)


__all__ = [
    "DEFAULT_ARGUMENT_MESSAGE",
    "DEFAULT_VALUE_MESSAGE",
    "that_argument",
    "that_value",
]
