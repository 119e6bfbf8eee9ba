#!/usr/bin/env python3
# coding: utf-8

"""Build delayed calls by indexing a function, like `map[:, [1, 2, 3]]`.

Python does not allow to add `__getitem__` to all callables, so a function 
must be wrapped by `delayable` at first. A bare `:` in the index stands for 
the placeholder::

    >>> dmap = delayable(map)
    >>> list(dmap[lambda x: x + 1, :]([1, 2, 3]))
    [2, 3, 4]
    >>> dmap[:, [1, 2, 3]]
    DelayedCall(<class 'map'>, _, [1, 2, 3])
"""

__author__  = "ChenyangGao <https://chenyanggao.github.io>"
__all__ = ["Delayable", "delayable"]

from collections.abc import Callable
from functools import partial, update_wrapper
from typing import Any, Self

from .delayed import make, DelayedCall
from .placeholder import _


def _is_colon(value: Any, /) -> bool:
    return (
        type(value) is slice 
        and value.start is None 
        and value.stop is None 
        and value.step is None
    )


class Delayable:
    """Wrap `func`, calling it is calling `func`, but indexing it makes 
    a `DelayedCall`.

    >>> dsorted = delayable(sorted)
    >>> dsorted([3, 1, 2])
    [1, 2, 3]
    >>> dsorted.kw(key=lambda t: t[0])[()]([(2, "a"), (1, "b")])
    [(1, 'b'), (2, 'a')]
    """

    def __init__(self, func: Callable, /, placeholder: Any = _):
        if not callable(func):
            raise TypeError("the first argument must be callable")
        self.func = func
        self.placeholder = placeholder
        self.keywords: dict[str, Any] = {}
        update_wrapper(self, func, updated=())

    def __call__(self, /, *args, **kwargs):
        return self.func(*args, **kwargs)

    def __getitem__(self, index, /) -> DelayedCall:
        args = index if type(index) is tuple else (index,)
        placeholder = self.placeholder
        return make(
            self.func, 
            (placeholder if _is_colon(v) else v for v in args), 
            self.keywords, 
            placeholder=placeholder, 
        )

    def __repr__(self, /) -> str:
        return "%s(%r)" % (type(self).__qualname__, self.func)

    def kw(self, /, **keywords) -> Self:
        "Return a copy with more keyword arguments to fix."
        inst = type(self)(self.func, self.placeholder)
        inst.keywords = {**self.keywords, **keywords}
        return inst


def delayable(
    func: None | Callable = None, 
    /, 
    placeholder: Any = _, 
) -> Delayable | Callable[[Callable], Delayable]:
    """Wrap `func` with `Delayable`, can also be used as a decorator.

    >>> @delayable(placeholder=None)
    ... def pair(a, b):
    ...     return a, b
    >>> pair[None, 2](1)
    (1, 2)
    >>> pair[:, 2](1)
    (1, 2)
    """
    if func is None:
        return partial(delayable, placeholder=placeholder)
    return Delayable(func, placeholder)
