#!/usr/bin/env python3
# coding: utf-8

__author__  = "ChenyangGao <https://chenyanggao.github.io>"
__all__ = ["DelayEvalError", "UnfilledPlaceholderError"]


class DelayEvalError(Exception):
    """Base class of the errors raised by `delayeval` itself."""


class UnfilledPlaceholderError(DelayEvalError, TypeError):
    """A placeholder was left without a call-time value (strict mode only).

    Fields::
        self.index: the position of the placeholder in the fixed arguments
        self.supplied: the number of call-time positional arguments
    """

    def __init__(self, /, index: int, supplied: int):
        self.index = index
        self.supplied = supplied
        super().__init__(index, supplied)

    def __str__(self, /) -> str:
        return "placeholder at position %d is unfilled (got %d positional argument%s)" % (
            self.index, self.supplied, "" if self.supplied == 1 else "s")
