# -*- test-case-name: pwbounce.test.test_scrypt -*-
from __future__ import annotations

from typing import Union

from attrs import evolve, field, frozen
from attrs.validators import ge, instance_of
from zope.interface import implementer

from twisted.logger import Logger

from ._codec import ScryptData, decode
from ._config import DEFAULT_SCRYPT_CONFIG, ScryptConfig
from ._errors import PasswordMismatchError
from ._interfaces import IHasher, IValidator
from ._primitives import SALT_LENGTH, deriveKey
from ._util import compareHashes, generateSalt


log = Logger()


@implementer(IHasher)
@frozen
class ScryptHasher:
    """
    An L{IHasher} that derives keys with scrypt.

    @ivar config: The cost parameters used for new hashes.
    @ivar saltLength: How many random bytes of salt each hash gets.
    """

    config: ScryptConfig = field(
        default=DEFAULT_SCRYPT_CONFIG, validator=instance_of(ScryptConfig)
    )
    saltLength: int = field(
        default=SALT_LENGTH, validator=[instance_of(int), ge(1)]
    )

    def __attrs_post_init__(self) -> None:
        if self.config.substituted:
            log.warn(
                "Invalid cost exponent for scrypt: {rejected}. "
                "Using default ({exponent}).",
                rejected=self.config.rejectedExponent,
                exponent=self.config.costExponent,
            )

    def generate(self, password: str) -> bytes:
        salt = generateSalt(self.saltLength)
        key = deriveKey(password, salt, self.config)
        return ScryptData(self.config, salt, key).encode()

    def copy(self) -> ScryptHasher:
        return evolve(self, config=self.config.clone())

    def withExponent(self, costExponent: int) -> ScryptHasher:
        """
        Create a hasher whose new hashes use a different cost.
        """
        return evolve(self, config=self.config.withExponent(costExponent))


@implementer(IValidator)
@frozen
class ScryptValidator:
    """
    An L{IValidator} for hashes produced by L{ScryptHasher}.

    Verification always uses the parameters stored in the hash, so hashes made
    under an older, cheaper configuration keep working after the hasher's
    cost is raised.
    """

    def compare(self, hashed: Union[bytes, str], password: str) -> None:
        data = decode(hashed)
        computed = deriveKey(password, data.salt, data.config)
        if not compareHashes(computed, data.key):
            raise PasswordMismatchError()


def defaultHasher() -> ScryptHasher:
    """
    Supply an L{IHasher} with L{DEFAULT_SCRYPT_CONFIG}.
    """
    return ScryptHasher()


def defaultValidator() -> ScryptValidator:
    return ScryptValidator()


__all__ = [
    "ScryptHasher",
    "ScryptValidator",
    "defaultHasher",
    "defaultValidator",
]
