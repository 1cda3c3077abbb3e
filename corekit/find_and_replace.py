"""Replace every occurrence of a substring."""

from __future__ import annotations

from typing import TypeVar

__all__ = ["find_and_replace"]

_S = TypeVar("_S", str, bytes)


def find_and_replace(text: _S, find: _S, replace: _S) -> _S:
    """Return a copy of ``text`` with every occurrence of ``find`` replaced.

    Occurrences are found left to right without overlap; text inserted by a
    replacement is never searched again. An empty ``find`` leaves the text
    unchanged.
    """
    if not find or find == replace:
        return text
    return text.replace(find, replace)