# -*- encoding: utf-8 -*-
# @File   : util.py
# @Time   : 2024/11/02 21:31:48
# @Author : Kariko Lin

"""Trimming and value conversion helpers shared by the parser and facade."""

import logging
from typing import Any, Callable

from .consts import TRIM_CHARS
from .errors import ConversionError

logger = logging.getLogger(__name__)

# the leading char decides, like `yes`, `True`, `1`.
_TRUTHY = ('1', 'y', 't')


def l_trim(text: str, chars: str = TRIM_CHARS) -> str:
    return text.lstrip(chars)


def r_trim(text: str, chars: str = TRIM_CHARS) -> str:
    return text.rstrip(chars)


def trim(text: str, chars: str = TRIM_CHARS) -> str:
    """Remove the longest prefix and suffix made of `chars` only.

    By default those are whitespace (without line breaks) and `;`.
    """
    return text.strip(chars)


def to_bool(text: str) -> bool:
    text = text.strip()
    return bool(text) and text[0].lower() in _TRUTHY


def convert_to[T](
    text: str,
    target: Callable[..., T] = str,
    *,
    strict: bool = False
) -> T | None:
    """Convert a raw INI value to `target`.

    - `str`: returned unchanged.
    - `bool`: see `to_bool()`, never fails.
    - anything else is called with the stripped text, like `int(text)`.

    On malformed input, a `ConversionError` is raised if `strict`,
    otherwise the failure is logged and the zero value `target()`
    (`0`, `0.0`, ...) comes back instead, or `None` if `target`
    cannot be called without argument.
    """
    if target is str:
        return text
    if target is bool:
        return to_bool(text)
    try:
        return target(text.strip())
    except (ValueError, TypeError, ArithmeticError) as e:
        if strict:
            raise ConversionError(text, target) from e
        logger.warning(
            'Cannot convert "%s" to %s, using its default instead.',
            text, _type_name(target))
    try:
        return target()
    except (ValueError, TypeError):
        # like `date.fromisoformat`, no zero value at all.
        return None


def _type_name(target: Any) -> str:
    return getattr(target, '__name__', repr(target))
