# -*- test-case-name: pwbounce.test.test_util -*-
from __future__ import annotations

from hmac import compare_digest
from os import urandom
from typing import TYPE_CHECKING, Callable, Coroutine, TypeVar

from twisted.internet.defer import Deferred

from ._errors import InsufficientEntropy
from ._typing_compat import ParamSpec


_T = TypeVar("_T")
_P = ParamSpec("_P")

if TYPE_CHECKING:  # pragma: no cover
    # https://github.com/twisted/twisted/issues/11862
    def deferToThread(f: Callable[[], _T]) -> Deferred[_T]:
        ...

else:
    from twisted.internet.threads import deferToThread


def integerPower(base: int, exponent: int) -> int:
    """
    Compute C{base ** exponent} exactly, by repeated squaring.

    @raise ValueError: if C{exponent} is negative.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    while True:
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent == 0:
            return result
        base *= base


def compareHashes(x: bytes, y: bytes) -> bool:
    """
    Compare two derived keys in constant time.

    Inputs of different lengths are unequal.
    """
    return compare_digest(x, y)


def generateSalt(numBytes: int) -> bytes:
    """
    Read C{numBytes} bytes from the operating system's secure random source.

    @raise InsufficientEntropy: if the source is unavailable or fails.
    """
    try:
        return urandom(numBytes)
    except (OSError, NotImplementedError) as e:
        raise InsufficientEntropy("secure random source failed") from e


def eagerDeferredCoroutine(
    f: Callable[_P, Coroutine[Deferred[object], object, _T]]
) -> Callable[_P, Deferred[_T]]:
    def inner(*args: _P.args, **kwargs: _P.kwargs) -> Deferred[_T]:
        return Deferred.fromCoroutine(f(*args, **kwargs))

    return inner


def threadedDeferredFunction(f: Callable[_P, _T]) -> Callable[_P, Deferred[_T]]:
    """
    When the decorated function is called, always run it in a thread.
    """

    def inner(*args: _P.args, **kwargs: _P.kwargs) -> Deferred[_T]:
        return deferToThread(lambda: f(*args, **kwargs))

    return inner


__all__ = [
    "compareHashes",
    "deferToThread",
    "eagerDeferredCoroutine",
    "generateSalt",
    "integerPower",
    "threadedDeferredFunction",
]
