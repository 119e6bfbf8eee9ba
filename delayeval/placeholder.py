#!/usr/bin/env python3
# coding: utf-8

from __future__ import annotations

__author__  = "ChenyangGao <https://chenyanggao.github.io>"
__all__ = ["Placeholder", "_", "placeholder_predicate"]

from collections.abc import Callable
from typing import final, Any, Never

from undefined import Undefined


@final
class Placeholder(Undefined):
    """Marks a positional slot whose value will be supplied at call time.
    """
    __slots__: tuple[str, ...] = ()

    def __init_subclass__(cls, /, **kwargs) -> Never:
        raise TypeError("Subclassing is not allowed")

    __eq__ = lambda self, other, /: self is other # type: ignore
    __hash__ = staticmethod(lambda: 0) # type: ignore
    __repr__ = staticmethod(lambda: "_") # type: ignore

    def __reduce__(self, /) -> str:
        return "_"


_ = Placeholder()


def placeholder_predicate(
    placeholder: Any = _, 
    /, 
    predicate: None | Callable[[Any], bool] = None, 
) -> Callable[[Any], bool]:
    """Resolve the placeholder configuration into a predicate.

    If `predicate` is given, it is returned as is, otherwise the predicate 
    tests the identity with `placeholder`.

    >>> is_placeholder = placeholder_predicate()
    >>> is_placeholder(_), is_placeholder(None)
    (True, False)
    >>> is_placeholder = placeholder_predicate(..., lambda v: v is None)
    >>> is_placeholder(...), is_placeholder(None)
    (False, True)
    """
    if predicate is not None:
        return predicate
    return lambda value, /: value is placeholder
