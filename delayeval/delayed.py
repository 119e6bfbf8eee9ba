#!/usr/bin/env python3
# coding: utf-8

"""Delayed evaluation of a callable with some of its arguments fixed.

A `DelayedCall` is much like `functools.partial`, except that its fixed 
positional arguments may contain placeholders, which are filled by the 
positional arguments given at call time::

    >>> from operator import sub
    >>> minus5 = delay(sub, _, 5)
    >>> minus5(10)
    5
"""

__author__  = "ChenyangGao <https://chenyanggao.github.io>"
__all__ = ["DelayedCall", "make", "delay"]

import logging

from collections.abc import Callable, Iterable, Mapping
from functools import partial
from itertools import repeat
from types import MappingProxyType
from typing import Any, Never

from .replace import merge, ReplacePlaceholder
from .placeholder import _, placeholder_predicate


logger = logging.getLogger("delayeval")


class DelayedCall:
    """The delayed evaluation of `func` with the fixed positional arguments 
    `args` and the fixed keyword arguments `keywords`.

    When called, the placeholders (`_` by default) in `args` are filled by 
    the positional arguments from left to right, the rest of them are 
    appended, and the keyword arguments override `keywords`.

    If `func` is also a `DelayedCall` with the same placeholder settings, 
    both are flattened into one, so nesting never gets deeper.

    >>> first = DelayedCall(lambda seq, i: seq[i], _, 0)
    >>> first("abc")
    'a'
    >>> by_len = DelayedCall(sorted, key=len)
    >>> by_len(["ccc", "a", "bb"])
    ['a', 'bb', 'ccc']
    >>> by_len(["ccc", "a", "bb"], key=lambda s: -len(s))
    ['ccc', 'bb', 'a']
    """
    __slots__ = (
        "func", "args", "keywords", "placeholder", "predicate", "strict", 
        "_is_placeholder", "_holes", "__weakref__", 
    )

    func: Callable
    args: tuple
    keywords: Mapping[str, Any]
    placeholder: Any
    predicate: None | Callable[[Any], bool]
    strict: bool

    def __new__(cls, func: Callable, /, *args, **keywords):
        return cls._new(func, args, keywords)

    @classmethod
    def _new(
        cls, 
        func: Callable, 
        args: Iterable = (), 
        keywords: None | Mapping[str, Any] = None, 
        placeholder: Any = _, 
        predicate: None | Callable[[Any], bool] = None, 
        strict: bool = False, 
    ):
        if not callable(func):
            raise TypeError("the first argument must be callable")
        args = tuple(args)
        keywords = dict(keywords) if keywords else {}
        if (isinstance(func, DelayedCall)
            and func.placeholder is placeholder
            and func.predicate is predicate
            and func.strict == strict
        ):
            logger.debug("flatten %r with %d positional argument(s)", func, len(args))
            args = merge(func.args, args, placeholder, predicate=predicate)
            keywords = {**func.keywords, **keywords}
            func = func.func
        is_placeholder = placeholder_predicate(placeholder, predicate)
        self = super().__new__(cls)
        setattr_ = partial(object.__setattr__, self)
        setattr_("func", func)
        setattr_("args", args)
        setattr_("keywords", MappingProxyType(keywords))
        setattr_("placeholder", placeholder)
        setattr_("predicate", predicate)
        setattr_("strict", strict)
        setattr_("_is_placeholder", is_placeholder)
        setattr_("_holes", sum(1 for v in args if is_placeholder(v)))
        return self

    def __setattr__(self, name, value, /) -> Never:
        raise AttributeError("readonly attribute: %r" % name)

    def __delattr__(self, name, /) -> Never:
        raise AttributeError("readonly attribute: %r" % name)

    def __call__(self, /, *args, **kwargs):
        return self.invoke(args, kwargs)

    def __reduce__(self, /):
        return type(self)._new, (
            self.func, self.args, dict(self.keywords), 
            self.placeholder, self.predicate, self.strict, 
        )

    def __repr__(self, /) -> str:
        return "%s(%s)" % (
            type(self).__qualname__,
            ", ".join((
                repr(self.func), 
                *map(repr, self.args),
                *("%s=%r" % e for e in self.keywords.items()),
            )),
        )

    @property
    def placeholders(self, /) -> int:
        "The number of placeholders in the fixed positional arguments."
        return self._holes

    def invoke(
        self, 
        /, 
        args: Iterable = (), 
        kwargs: None | Mapping[str, Any] = None, 
    ):
        """Call `self.func` with the merged arguments and return its result.

        Whatever `self.func` raises is propagated as it is.
        """
        func, args0, kwargs0 = self.func, self.args, self.keywords
        if self._holes:
            pargs = tuple(ReplacePlaceholder(args0, args, self._is_placeholder, self.strict))
        else:
            pargs = args0 + tuple(args)
        kargs = {**kwargs0, **kwargs} if kwargs else kwargs0
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "invoke %r with %d positional and %d keyword argument(s)", 
                func, len(pargs), len(kargs), 
            )
        return func(*pargs, **kargs)

    def describe(self, /) -> str:
        """Return a human-readable description.

        >>> from operator import getitem
        >>> print(delay(sorted, _, key=len).describe())
        delayed evaluation: sorted[_; key = len (some function)]
        >>> print(delay(getitem, _, 1).describe())
        delayed evaluation: getitem[_, 1]
        """
        func = self.func
        name = getattr(func, "__qualname__", None) or repr(func)
        is_placeholder = self._is_placeholder
        mark = repr(self.placeholder)
        xs = ", ".join(mark if is_placeholder(v) else _describe(v) for v in self.args)
        kw = ", ".join(
            ("%s = %s (some function)" if callable(v) else "%s = %s") % (k, _describe(v))
            for k, v in self.keywords.items()
        )
        if kw:
            kw = "; " + kw
        return "delayed evaluation: %s[%s%s]" % (name, xs, kw)

    @classmethod
    def skip(
        cls, 
        func: None | Callable = None, 
        /, 
        count: int = 1, 
    ):
        """Leave the first `count` positional arguments to be supplied later, 
        can also be used as a decorator.

        >>> @DelayedCall.skip(count=2)
        ... def triple(a, b, c):
        ...     return a, b, c
        >>> DelayedCall(triple, _, _, 3)(1, 2)
        (1, 2, 3)
        """
        if func is None:
            return partial(cls.skip, count=count)
        return cls(func, *repeat(_, count))


def _describe(value: Any, /) -> str:
    if callable(value):
        return getattr(value, "__qualname__", None) or repr(value)
    return str(value)


def make(
    target: Callable, 
    positional: Iterable = (), 
    keyword: None | Mapping[str, Any] = None, 
    /, 
    *, 
    placeholder: Any = _, 
    predicate: None | Callable[[Any], bool] = None, 
    strict: bool = False, 
) -> DelayedCall:
    """Create a `DelayedCall`, with explicit placeholder settings.

    :param target: the callable to call later
    :param positional: the fixed positional arguments, may contain placeholders
    :param keyword: the fixed keyword arguments
    :param placeholder: the sentinel which marks a slot to fill
    :param predicate: if given, decides which values are placeholders
    :param strict: raise `UnfilledPlaceholderError` at call time, if some 
                   placeholders can not be filled

    >>> make(divmod, (None, 7), placeholder=None)(30)
    (4, 2)
    """
    return DelayedCall._new(target, positional, keyword, placeholder, predicate, strict)


def delay(func: Callable, /, *args, **keywords) -> DelayedCall:
    """Create a `DelayedCall` with the default placeholder `_`.

    >>> delay(max, _, 3)(1)
    3
    """
    return DelayedCall(func, *args, **keywords)
