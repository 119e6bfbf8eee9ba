#!/usr/bin/env python3
# coding: utf-8

"""Delayed evaluation of callables, with placeholders for the positional 
arguments to supply later.

    >>> from delayeval import delay, _
    >>> delay(divmod, _, 7)(30)
    (4, 2)
    >>> delay(sorted, key=len)(["ccc", "a", "bb"])
    ['a', 'bb', 'ccc']
"""

__author__  = "ChenyangGao <https://chenyanggao.github.io>"
__version__ = (0, 1, 0)
__all__ = [
    "Placeholder", "_", "placeholder_predicate", 
    "ReplacePlaceholder", "merge", 
    "DelayedCall", "make", "delay", 
    "Delayable", "delayable", 
    "DelayEvalError", "UnfilledPlaceholderError", 
]

from .exceptions import DelayEvalError, UnfilledPlaceholderError
from .placeholder import Placeholder, _, placeholder_predicate
from .replace import ReplacePlaceholder, merge
from .delayed import DelayedCall, make, delay
from .sugar import Delayable, delayable
