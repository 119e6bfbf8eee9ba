#!/usr/bin/env python3
# coding: utf-8

"""Merge the fixed positional arguments of a delayed call with the ones 
supplied at call time.

Placeholders in the fixed arguments are filled from left to right by the 
supplied arguments, and the supplied arguments left over are appended::

    >>> merge((1, _, _, 4), (2, 3, 5))
    (1, 2, 3, 4, 5)
"""

__author__  = "ChenyangGao <https://chenyanggao.github.io>"
__all__ = ["ReplacePlaceholder", "merge"]

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from .exceptions import UnfilledPlaceholderError
from .placeholder import _, placeholder_predicate


def _as_sequence(it: Iterable, /) -> Sequence:
    if isinstance(it, Sequence):
        return it
    return tuple(it)


class ReplacePlaceholder:
    """Iterate over the merged positional arguments, lazily.

    A placeholder in `fixed` takes the next unconsumed value of `supplied`. 
    When `supplied` is exhausted, the placeholder is yielded as it is, unless 
    `strict` is true, in which case `UnfilledPlaceholderError` is raised.
    In that case `len` raises the same error.

    >>> r = ReplacePlaceholder(("a", _, _, "d"), ("b", "c", "e"))
    >>> len(r), tuple(r)
    (5, ('a', 'b', 'c', 'd', 'e'))
    >>> tuple(ReplacePlaceholder((_, 20), ()))
    (_, 20)
    """
    __slots__ = ("fixed", "supplied", "is_placeholder", "strict")

    def __init__(
        self, 
        /, 
        fixed: Iterable, 
        supplied: Iterable, 
        is_placeholder: None | Callable[[Any], bool] = None, 
        strict: bool = False, 
    ):
        self.fixed = _as_sequence(fixed)
        self.supplied = _as_sequence(supplied)
        if is_placeholder is None:
            is_placeholder = placeholder_predicate()
        self.is_placeholder = is_placeholder
        self.strict = strict

    def __iter__(self, /) -> Iterator:
        is_placeholder = self.is_placeholder
        supplied = self.supplied
        supplied_it = iter(supplied)
        for i, v in enumerate(self.fixed):
            if is_placeholder(v):
                try:
                    v = next(supplied_it)
                except StopIteration:
                    if self.strict:
                        raise UnfilledPlaceholderError(i, len(supplied)) from None
            yield v
        yield from supplied_it

    def __len__(self, /) -> int:
        holes = sum(1 for v in self.fixed if self.is_placeholder(v))
        nsupplied = len(self.supplied)
        if self.strict and holes > nsupplied:
            is_placeholder = self.is_placeholder
            index = [i for i, v in enumerate(self.fixed) if is_placeholder(v)][nsupplied]
            raise UnfilledPlaceholderError(index, nsupplied)
        return len(self.fixed) + nsupplied - min(holes, nsupplied)

    def __repr__(self, /) -> str:
        return "%s(%r, %r)" % (type(self).__qualname__, self.fixed, self.supplied)


def merge(
    fixed: Iterable, 
    supplied: Iterable, 
    /, 
    placeholder: Any = _, 
    *, 
    predicate: None | Callable[[Any], bool] = None, 
    strict: bool = False, 
) -> tuple:
    """Merge `supplied` into `fixed`, see `ReplacePlaceholder`.

    :param fixed: the fixed arguments, may contain placeholders
    :param supplied: the arguments supplied at call time
    :param placeholder: the sentinel which marks a slot to fill
    :param predicate: if given, decides which values are placeholders, 
                      `placeholder` is ignored then
    :param strict: raise `UnfilledPlaceholderError` for an unfillable 
                   placeholder, instead of keeping it as a literal value

    :return: the merged arguments

    >>> merge((), ())
    ()
    >>> merge((10,), ())
    (10,)
    >>> merge((_, 20, _, 40), (10, 30, 50))
    (10, 20, 30, 40, 50)
    >>> merge((None, 2), (1,), None)
    (1, 2)
    """
    return tuple(ReplacePlaceholder(
        fixed, supplied, placeholder_predicate(placeholder, predicate), strict))
