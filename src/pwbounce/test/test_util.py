# Copyright (c) 2026. See LICENSE for details.

"""
Tests for L{pwbounce._util}.
"""

from statistics import median
from time import perf_counter
from typing import List, Tuple

from hypothesis import given
from hypothesis.strategies import binary, integers

from twisted.internet.defer import Deferred, succeed

from .. import _util
from .._errors import InsufficientEntropy
from .._util import (
    compareHashes,
    eagerDeferredCoroutine,
    generateSalt,
    integerPower,
)
from ._trial import TestCase


__all__ = ()


class IntegerPowerTests(TestCase):
    """
    Tests for L{integerPower}.
    """

    def test_examples(self) -> None:
        """
        L{integerPower} computes exact integer powers, including the edge
        cases of a zero base and a zero exponent.
        """
        for base, exponent, expected in [
            (42, 0, 1),
            (0, 42, 0),
            (2, 8, 256),
            (10, 10, 10000000000),
        ]:
            self.assertEqual(integerPower(base, exponent), expected)

    @given(integers(min_value=0, max_value=1000), integers(0, 70))
    def test_matchesBuiltin(self, base: int, exponent: int) -> None:
        """
        L{integerPower} agrees with C{**} and never rounds.
        """
        self.assertEqual(integerPower(base, exponent), base**exponent)

    def test_negativeExponent(self) -> None:
        """
        A negative exponent is rejected with L{ValueError}.
        """
        self.assertRaises(ValueError, integerPower, 2, -1)


class CompareHashesTests(TestCase):
    """
    Tests for L{compareHashes}.
    """

    def test_examples(self) -> None:
        """
        Identical byte strings are equal; a strict prefix is not.
        """
        self.assertTrue(compareHashes(b"abcd", b"abcd"))
        self.assertFalse(compareHashes(b"abcd", b"abc"))
        self.assertFalse(compareHashes(b"abcd", b"abce"))
        self.assertTrue(compareHashes(b"", b""))

    @given(binary())
    def test_reflexive(self, x: bytes) -> None:
        """
        Every byte string is equal to itself.
        """
        self.assertTrue(compareHashes(x, bytes(x)))

    @given(binary(), binary())
    def test_matchesEquality(self, x: bytes, y: bytes) -> None:
        """
        L{compareHashes} returns the same answer as C{==}, including for
        inputs of different lengths.
        """
        self.assertEqual(compareHashes(x, y), x == y)

    def test_delegatesToConstantTime(self) -> None:
        """
        L{compareHashes} uses L{hmac.compare_digest} rather than C{==}.
        """
        calls: List[Tuple[bytes, bytes]] = []

        def compare_digest(a: bytes, b: bytes) -> bool:
            calls.append((a, b))
            return True

        self.patch(_util, "compare_digest", compare_digest)
        self.assertTrue(compareHashes(b"abcd", b"wxyz"))
        self.assertEqual(calls, [(b"abcd", b"wxyz")])

    def test_timingIndependentOfMismatchPosition(self) -> None:
        """
        Comparing inputs that differ in their first byte takes about as long
        as comparing inputs that differ in their last byte.  The inputs are
        large enough that an early-exit comparison would be many times
        faster for the first case; the tolerance is loose to absorb noise.
        """
        size = 2**20
        reference = bytes(size)
        early = b"\x01" + bytes(size - 1)
        late = bytes(size - 1) + b"\x01"

        def medianTime(other: bytes) -> float:
            samples = []
            for _ in range(31):
                start = perf_counter()
                compareHashes(reference, other)
                samples.append(perf_counter() - start)
            return median(samples)

        medianTime(late)
        ratio = medianTime(late) / medianTime(early)
        self.assertLess(ratio, 4.0)
        self.assertGreater(ratio, 0.25)


class GenerateSaltTests(TestCase):
    """
    Tests for L{generateSalt}.
    """

    def test_length(self) -> None:
        """
        L{generateSalt} returns exactly the number of bytes requested.
        """
        self.assertEqual(len(generateSalt(16)), 16)
        self.assertEqual(len(generateSalt(33)), 33)

    def test_unique(self) -> None:
        """
        Two salts are (overwhelmingly likely to be) different.
        """
        self.assertNotEqual(generateSalt(16), generateSalt(16))

    def test_sourceFailure(self) -> None:
        """
        If the operating system cannot supply random bytes,
        L{InsufficientEntropy} is raised with the original error as its
        cause.
        """
        failure = OSError("no entropy")

        def urandom(n: int) -> bytes:
            raise failure

        self.patch(_util, "urandom", urandom)
        raised = self.assertRaises(InsufficientEntropy, generateSalt, 16)
        self.assertIs(raised.__cause__, failure)


class EagerDeferredCoroutineTests(TestCase):
    """
    Tests for L{eagerDeferredCoroutine}.
    """

    def test_returnsDeferred(self) -> None:
        """
        A decorated coroutine function returns a L{Deferred} that has already
        run as far as it can.
        """

        @eagerDeferredCoroutine
        async def double(value: int) -> int:
            return 2 * await succeed(value)

        result = double(21)
        self.assertIsInstance(result, Deferred)
        self.assertEqual(self.successResultOf(result), 42)
