# -*- encoding: utf-8 -*-
# @File   : keys.py
# @Time   : 2026/10/12 21:41:55
# @Author : Kariko Lin

"""Composite key grammar.

An array item is declared by wrapping its key:

    ```
    # default element separator
    [@IntArray]: 10 12 13
    # `,` as element separator
    [@IntArray1@,]: 1, 2, 3
    ```

Nothing about array-ness is stored aside: every question below is
answered by looking at the raw key again.
"""

from ..errors import ConfTypeError, Result
from .consts import ARRAY_TAG, COMPOSITE_LEFT, COMPOSITE_RIGHT


def looks_composite(raw_key: str) -> bool:
    """The key *tries* to be an array, well-formed or not."""
    return (
        raw_key.startswith(COMPOSITE_LEFT + ARRAY_TAG)
        and raw_key.endswith(COMPOSITE_RIGHT))


def is_composite(raw_key: str) -> bool:
    return (
        len(raw_key) >= 4
        and raw_key[0] == COMPOSITE_LEFT
        and raw_key[-1] == COMPOSITE_RIGHT
        and raw_key[1] == ARRAY_TAG)


def normalize_key(raw_key: str) -> str:
    """Strip brackets and tags, e.g. `[@arr@,]` -> `arr`.

    Plain keys come back untouched.
    """
    if not is_composite(raw_key):
        return raw_key
    if len(raw_key) > 4 and raw_key[-3] == ARRAY_TAG:
        return raw_key[2:-3]
    return raw_key[2:-1]


def element_separator(raw_key: str, default: str) -> Result:
    """Resolve the element separator of an array key.

    `default` is used for the short `[@key]` form.
    """
    if not is_composite(raw_key):
        return Result.fail(
            ConfTypeError(f'item is not an array, key: {raw_key}'))

    idx = raw_key.rfind(ARRAY_TAG)
    if idx == 1:
        if len(default) != 1:
            return Result.fail(ConfTypeError(
                f'element separator must be one char, got {default!r}'))
        return Result(default)
    # the tag must sit right before a single separator char and `]`.
    if idx != len(raw_key) - 3:
        return Result.fail(ConfTypeError(
            f'array separator can only be one char, key: {raw_key}'))
    return Result(raw_key[idx + 1])


def check_key(raw_key: str) -> str | None:
    """Tell why `raw_key` can't be used, or `None` if it's fine."""
    if not raw_key:
        return 'empty key'
    if not looks_composite(raw_key):
        if raw_key.startswith(COMPOSITE_LEFT + ARRAY_TAG):
            return f'unclosed composite key {raw_key}'
        return None
    if not is_composite(raw_key):
        return f'malformed composite key {raw_key}'
    _, err = element_separator(raw_key, ' ')
    if err is not None:
        return f'malformed composite key {raw_key}: {err}'
    if not normalize_key(raw_key):
        return f'composite key {raw_key} names nothing'
    return None
