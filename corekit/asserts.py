"""Assertion-like checks that raise exceptions instead of aborting."""

from __future__ import annotations

__all__ = [
    "AssertionException",
    "IllegalStateException",
    "require_true",
    "check_true",
    "assert_true",
]


class AssertionException(AssertionError):
    """Raised by :func:`assert_true` when an asserted condition does not hold."""


class IllegalStateException(RuntimeError):
    """Raised by :func:`check_true` when a state check fails."""


def require_true(condition: bool, msg: str = "invalid argument passed") -> None:
    """Check that an argument condition holds.

    :raises ValueError: if ``condition`` is false.
    """
    if not condition:
        raise ValueError(msg)


def check_true(condition: bool, msg: str = "check reported invalid state") -> None:
    """Check that a state condition holds.

    :raises IllegalStateException: if ``condition`` is false.
    """
    if not condition:
        raise IllegalStateException(msg)


def assert_true(condition: bool, msg: str = "assertion failed") -> None:
    """Assert that a condition holds.

    Like the ``assert`` statement, this is disabled when Python runs with
    optimisations enabled (``-O``).

    :raises AssertionException: if assertions are enabled and ``condition`` is false.
    """
    if __debug__ and not condition:
        raise AssertionException(msg)