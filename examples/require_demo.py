# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Require Demo: Turning Check Results Into Errors.

This demo shows the two ways to consume a validation result: as a boolean with
``check.that`` and as an exception with ``require.that_argument`` or
``require.that_value``.

Run with:
    python examples/require_demo.py
"""

from phx_validation import InvalidArgumentError, InvalidStateError, check, require, validations


def paginate(items, page_size):
    require.that_argument("items", validations.is_type(items, list))
    require.that_argument(
        "page_size",
        validations.is_in_range(page_size, 1, 100),
        "'{name}' must be between 1 and 100.",
    )

    pages = [items[i:i + page_size] for i in range(0, len(items), page_size)]
    require.that_value(
        validations.is_true(sum(len(page) for page in pages) == len(items)),
        lambda: f"Pagination lost items: {len(items)} in, {pages!r} out.",
    )
    return pages


def demo_check():
    """Show results used as plain booleans."""
    print("\n" + "=" * 70)
    print("DEMO 1: check.that")
    print("=" * 70)
    for name in ("alice", "   ", None):
        ok = check.that(validations.is_not_blank(name))
        print(f"  is_not_blank({name!r:>7}) -> {ok}")


def demo_require():
    """Show failures escalated with their cause attached."""
    print("\n" + "=" * 70)
    print("DEMO 2: require.that_argument")
    print("=" * 70)
    print(f"  paginate(range 5, 2) -> {paginate(list(range(5)), 2)}")
    try:
        paginate(list(range(5)), 0)
    except InvalidArgumentError as e:
        print(f"\n  Error message:\n    {e}")
        print(f"  Argument: {e.argument_name}")
        print(f"  Cause:    {e.cause}")
    except InvalidStateError as e:
        print(f"  Unexpected state error: {e}")


def main():
    demo_check()
    demo_require()
    print()


if __name__ == "__main__":
    main()
