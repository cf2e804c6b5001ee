# -*- test-case-name: pwbounce.test.test_engine -*-
from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Type

from attrs import Factory, field, frozen

from twisted.logger import Logger

from ._codec import CURRENT_VERSION, decode
from ._errors import HashSyntaxError, PasswordMismatchError, VersionError
from ._interfaces import IHasher, IValidator, PasswordEngine
from ._scrypt import ScryptHasher, ScryptValidator
from ._util import eagerDeferredCoroutine, threadedDeferredFunction


log = Logger()


@threadedDeferredFunction
def generateInThread(hasher: IHasher, password: str) -> bytes:
    """
    Run L{IHasher.generate} in a thread.
    """
    return hasher.generate(password)


@threadedDeferredFunction
def compareInThread(validator: IValidator, hashed: str, password: str) -> None:
    """
    Run L{IValidator.compare} in a thread.
    """
    validator.compare(hashed.encode("utf-8"), password)


@frozen
class ScryptPasswordEngine:
    """
    Built-in engine for hashing passwords for secure storage with C{scrypt},
    keeping the slow key derivation off the reactor thread.

    Implementation of L{PasswordEngine}.

    @ivar hasher: Creates new hashes, including upgraded ones.
    @ivar validator: Checks stored hashes.
    @ivar minimumExponent: Stored hashes with a lower cost exponent are
        replaced after a successful check.
    """

    hasher: ScryptHasher = field(factory=ScryptHasher)
    validator: ScryptValidator = field(factory=ScryptValidator)
    minimumExponent: int = field(
        default=Factory(
            lambda self: self.hasher.config.costExponent, takes_self=True
        )
    )

    @eagerDeferredCoroutine
    async def computeKeyText(self, passwordText: str) -> str:
        hashed = await generateInThread(self.hasher, passwordText)
        return hashed.decode("ascii")

    @eagerDeferredCoroutine
    async def checkAndReset(
        self,
        storedPasswordHash: str,
        providedPasswordText: str,
        storeNewHash: Callable[[str], Awaitable[None]],
    ) -> bool:
        try:
            await compareInThread(
                self.validator, storedPasswordHash, providedPasswordText
            )
        except PasswordMismatchError:
            return False
        except (HashSyntaxError, VersionError) as e:
            log.debug(
                "Stored password hash is unusable: {errorType}",
                errorType=type(e).__name__,
            )
            raise
        if self.needsUpgrade(storedPasswordHash):
            newHash = await self.computeKeyText(providedPasswordText)
            log.info(
                "Upgrading stored password hash to cost exponent {exponent}",
                exponent=self.hasher.config.costExponent,
            )
            await storeNewHash(newHash)
        return True

    def needsUpgrade(self, storedPasswordHash: str) -> bool:
        """
        Should a hash be regenerated with the current hasher the next time the
        password is known?

        @raise HashSyntaxError: if the stored hash is malformed.
        @raise VersionError: if its format version is unsupported.
        """
        data = decode(storedPasswordHash)
        current = self.hasher.config
        return (
            data.version != CURRENT_VERSION
            or data.config.costExponent < self.minimumExponent
            or data.config.blockSize != current.blockSize
            or data.config.parallelism != current.parallelism
            or data.config.keyLength != current.keyLength
        )


def defaultSecureEngine() -> PasswordEngine:
    """
    Supply an implementation to the caller of L{PasswordEngine} suitable for
    deployment to production.

    @see: for testing, use L{pwbounce.testing.engineForTesting}.
    """
    return ScryptPasswordEngine()


if TYPE_CHECKING:
    _1: Type[PasswordEngine] = ScryptPasswordEngine


__all__ = [
    "ScryptPasswordEngine",
    "compareInThread",
    "defaultSecureEngine",
    "generateInThread",
]
