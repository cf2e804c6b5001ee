# -*- test-case-name: pwbounce.test.test_scrypt,pwbounce.test.test_engine -*-
from __future__ import annotations

from typing import Awaitable, Callable

from zope.interface import Interface

from twisted.internet.defer import Deferred

from ._typing_compat import Protocol


class IHasher(Interface):
    """
    Produces self-describing hashes of passwords.

    The output carries everything needed to verify a password later: an
    algorithm marker, a format version, cost parameters, the salt and the
    derived key.
    """

    def generate(password: str) -> bytes:
        """
        Hash a password with a fresh salt.

        @param password: The plain-text password, as entered by a user.

        @return: The encoded hash; callers must treat it as opaque.
        """


class IValidator(Interface):
    """
    Checks plain-text passwords against hashes produced by an L{IHasher} for
    the same algorithm.

    Any exception must be treated as an authentication failure; only a normal
    return means the password matched.  Implementations may raise
    L{pwbounce.HashSyntaxError} for a malformed hash,
    L{pwbounce.VersionError} for an unsupported format version, and
    L{pwbounce.PasswordMismatchError} if the password is wrong.
    """

    def compare(hashed: bytes, password: str) -> None:
        """
        Verify C{password} against C{hashed}.

        @param hashed: A value previously returned by L{IHasher.generate}.

        @param password: The plain-text password to check.
        """


class PasswordEngine(Protocol):
    """
    Interface required to hash passwords for secure storage without blocking
    the reactor.
    """

    def computeKeyText(self, passwordText: str) -> Deferred[str]:
        """
        Compute some text to store for a given plain-text password.

        @param passwordText: The text of a new password, as entered by a user.

        @return: The hashed text to store.
        """

    def checkAndReset(
        self,
        storedPasswordHash: str,
        providedPasswordText: str,
        storeNewHash: Callable[[str], Awaitable[None]],
    ) -> Deferred[bool]:
        """
        Check the given stored password text against the given provided
        password text.  If cost parameters have changed since the given hash
        was stored and C{providedPasswordText} is correct, compute a new hash
        and use C{storeNewHash} to write it back to the data store.

        @param storedPasswordHash: the opaque hashed output from our hash
            function, stored in a datastore.

        @param providedPasswordText: the plain-text password provided by the
            user.

        @param storeNewHash: A function that stores a new hash in the database.

        @return: a L{Deferred} firing with C{True} if the password matches and
            C{False} if it does not.
        """


__all__ = [
    "IHasher",
    "IValidator",
    "PasswordEngine",
]
