# -*- test-case-name: pwbounce.test.test_errors -*-
# Copyright (c) 2026. See LICENSE for details.

"""
Failures raised while hashing or verifying passwords.

None of these carry password text or derived key material.
"""

from typing import Iterable, Tuple


class PasswordHashError(Exception):
    """
    Base class for everything raised by L{pwbounce}.
    """


class HashSyntaxError(PasswordHashError):
    """
    An encoded hash does not have the expected structure.

    @ivar cause: A fixed description of what was wrong; never a copy of the
        offending input.
    """

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return "Syntax error: " + self.cause


class VersionError(PasswordHashError):
    """
    An encoded hash was produced by a format version this library does not
    understand.

    @ivar prefix: Prepended to the message; usually the algorithm marker.
    @ivar expected: The versions that would have been accepted.
    @ivar got: The version that was found.
    """

    def __init__(self, prefix: str, expected: Iterable[str], got: str) -> None:
        self.prefix = prefix
        self.expected: Tuple[str, ...] = tuple(expected)
        self.got = got
        super().__init__(prefix, self.expected, got)

    def __str__(self) -> str:
        if len(self.expected) == 1:
            detail = (
                "Invalid algorithm version, "
                f"expected {self.expected[0]}, got {self.got}"
            )
        else:
            detail = (
                "Invalid algorithm version, expected one of "
                f"{', '.join(self.expected)}, got {self.got}"
            )
        return f"{self.prefix or 'Algorithm error'}: {detail}"


class PasswordMismatchError(PasswordHashError):
    """
    A password does not match a stored hash.
    """

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "pwbounce: Passwords do not match"


class InsufficientEntropy(PasswordHashError):
    """
    The system's secure random source could not supply bytes.
    """


class InvalidParameters(PasswordHashError):
    """
    The key derivation function rejected its cost parameters.
    """


__all__ = [
    "HashSyntaxError",
    "InsufficientEntropy",
    "InvalidParameters",
    "PasswordHashError",
    "PasswordMismatchError",
    "VersionError",
]
