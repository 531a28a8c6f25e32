# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Predicate checks returning :class:`~phx_validation.result.ValidationResult`.

Every function here is pure: it never mutates its input, keeps no state and
never raises for the inputs it documents. A failed check carries a
:class:`~phx_validation.exceptions.ValidationError` whose message is meant for
humans only.
"""

from __future__ import annotations

from typing import Any, Collection, Iterable, List, Optional, Sized

from .result import ValidationResult

_success = ValidationResult.success
_failure = ValidationResult.failure


def _distinct(elements: Iterable[Any]) -> List[Any]:
    # Order-preserving; tolerates unhashable elements.
    distinct: List[Any] = []
    for element in elements:
        if element not in distinct:
            distinct.append(element)
    return distinct


def _type_name(expected_type: Any) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(_type_name(t) for t in expected_type)
    return getattr(expected_type, "__qualname__", repr(expected_type))


def is_true(condition: Any) -> ValidationResult:
    """Validate that *condition* is true."""

    if condition:
        return _success()
    return _failure("The expression was expected to be true.")


def is_false(condition: Any) -> ValidationResult:
    """Validate that *condition* is false."""

    if condition:
        return _failure("The expression was expected to be false.")
    return _success()


def is_equal_to(value: Any, expected: Any) -> ValidationResult:
    """Validate that *value* equals *expected* using the type's own equality.

    Plain objects compare by identity, ``None`` equals only ``None``.
    """

    if value == expected:
        return _success()
    return _failure(f"The value <{value!r}> did not match expected value <{expected!r}>.")


def is_not_equal_to(value: Any, unexpected: Any) -> ValidationResult:
    """Validate that *value* does not equal *unexpected*."""

    if value == unexpected:
        return _failure(f"The value <{value!r}> matched unexpected value <{unexpected!r}>.")
    return _success()


def is_none(value: Any) -> ValidationResult:
    if value is None:
        return _success()
    return _failure(f"The value <{value!r}> is not None.")


def is_not_none(value: Any) -> ValidationResult:
    if value is None:
        return _failure("The value is None.")
    return _success()


def is_none_or_empty(text: Optional[str]) -> ValidationResult:
    """Validate that *text* is ``None`` or the empty string."""

    if not text:
        return _success()
    return _failure(f"The value <{text!r}> is not None or empty.")


def is_not_none_or_empty(text: Optional[str]) -> ValidationResult:
    """Validate that *text* is neither ``None`` nor the empty string."""

    if not text:
        return _failure(f"The value <{text!r}> is None or empty.")
    return _success()


def _is_blank(text: Optional[str]) -> bool:
    # str.isspace() is False for "", so emptiness is checked separately.
    return text is None or text == "" or text.isspace()


def is_blank(text: Optional[str]) -> ValidationResult:
    """Validate that *text* is ``None``, empty, or only whitespace.

    Whitespace is anything :meth:`str.isspace` accepts, which includes tabs,
    newlines, vertical tabs, form feeds and the unicode space separators.
    """

    if _is_blank(text):
        return _success()
    return _failure(f"The value <{text!r}> is not blank.")


def is_not_blank(text: Optional[str]) -> ValidationResult:
    """Validate that *text* has at least one non-whitespace character."""

    if _is_blank(text):
        return _failure(f"The value <{text!r}> is blank.")
    return _success()


def is_empty(collection: Sized) -> ValidationResult:
    size = len(collection)
    if size == 0:
        return _success()
    return _failure(f"The collection (size:{size}) is not empty.")


def is_not_empty(collection: Sized) -> ValidationResult:
    if len(collection) == 0:
        return _failure("The collection is empty.")
    return _success()


def contains_all(collection: Collection[Any], *elements: Any) -> ValidationResult:
    """Validate that *collection* contains every one of *elements*.

    *elements* is treated as a set: duplicates collapse before the scan. The
    scan over *collection* stops as soon as nothing is left to find. With no
    elements the check succeeds.

    The failure message lists the elements that were never found.
    """

    missing = _distinct(elements)
    if not missing:
        return _success()

    for value in collection:
        missing = [element for element in missing if not (element is value or element == value)]
        if not missing:
            return _success()

    listed = " ".join(repr(element) for element in missing)
    return _failure(f"The collection did not contain elements: [{listed}]")


def contains_any(collection: Collection[Any], *elements: Any) -> ValidationResult:
    """Validate that *collection* contains at least one of *elements*.

    Elements are tried in order and the first one found ends the check. With no
    elements the check fails.
    """

    for element in elements:
        if element in collection:
            return _success()
    return _failure("The collection did not contain any of the provided elements.")


def is_not_zero(value: Any) -> ValidationResult:
    if value == 0:
        return _failure("The value is 0.")
    return _success()


def is_in_range(
    value: Any,
    min_value: Any,
    max_value: Any,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
) -> ValidationResult:
    """Validate that *value* lies between *min_value* and *max_value*.

    Both bounds are inclusive by default. Each flag only affects its own bound,
    so a value strictly inside the range passes whatever the flags are. Values
    are compared with the ordering operators of their type.
    """

    above_min = min_value <= value if min_inclusive else min_value < value
    below_max = value <= max_value if max_inclusive else value < max_value
    if above_min and below_max:
        return _success()

    lower = "[" if min_inclusive else "("
    upper = "]" if max_inclusive else ")"
    return _failure(
        f"The value {value!r} is outside of the range {lower}{min_value!r}, {max_value!r}{upper}"
    )


def is_type(value: Any, expected_type: Any) -> ValidationResult:
    """Validate that *value* is an instance of *expected_type*.

    *expected_type* may be a class, an abstract base class, a
    ``runtime_checkable`` protocol or a tuple of those. Instances of subclasses
    pass a check for their base. ``None`` never passes; use
    :func:`is_type_or_none` to allow it.
    """

    if value is not None and isinstance(value, expected_type):
        return _success()
    return _failure(
        f"The value <{value!r}> is not assignable to type <{_type_name(expected_type)}>."
    )


def is_type_or_none(value: Any, expected_type: Any) -> ValidationResult:
    """Validate that *value* is ``None`` or an instance of *expected_type*."""

    if value is None or isinstance(value, expected_type):
        return _success()
    return _failure(
        f"The value <{value!r}> is not None and not assignable to type "
        f"<{_type_name(expected_type)}>."
    )


__all__ = [
    "contains_all",
    "contains_any",
    "is_blank",
    "is_empty",
    "is_equal_to",
    "is_false",
    "is_in_range",
    "is_none",
    "is_none_or_empty",
    "is_not_blank",
    "is_not_empty",
    "is_not_equal_to",
    "is_not_none",
    "is_not_none_or_empty",
    "is_not_zero",
    "is_true",
    "is_type",
    "is_type_or_none",
]
