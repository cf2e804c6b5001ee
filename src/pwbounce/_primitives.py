# -*- test-case-name: pwbounce.test.test_primitives -*-
from __future__ import annotations

from ._config import ScryptConfig
from ._errors import InvalidParameters


try:
    from hashlib import scrypt
except ImportError:
    # PyPy ships without scrypt so we need cryptography there.
    from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

    # The signature of C{scrypt} from the standard library has a bunch of
    # additional complexity, supporting memory views and types other than
    # `bytes`, but this is not a publicly exposed or particularly principled
    # annotation so we ignore the minor differences in the two signatures here.

    def scrypt(  # type:ignore[misc]
        password: bytes,
        *,
        salt: bytes,
        n: int,
        r: int,
        p: int,
        maxmem: int = 0,
        dklen: int = 64,
    ) -> bytes:
        return Scrypt(salt=salt, length=dklen, n=n, r=r, p=p).derive(password)


SALT_LENGTH = 16

# hashlib refuses a larger maxmem.
MAX_MEMORY = 2**31 - 1


def memoryLimit(config: ScryptConfig) -> int:
    """
    How much memory scrypt may use for the given parameters, with headroom.
    """
    needed = (2**8) * config.cost * config.blockSize
    needed += (2**7) * config.blockSize * config.parallelism
    return min(needed, MAX_MEMORY)


def deriveKey(password: str, salt: bytes, config: ScryptConfig) -> bytes:
    """
    Run scrypt over C{password} with C{salt} and the parameters in C{config}.

    @raise InvalidParameters: if scrypt rejects the parameters.
    """
    try:
        return scrypt(
            password.encode("utf-8"),
            salt=salt,
            n=config.cost,
            r=config.blockSize,
            p=config.parallelism,
            maxmem=memoryLimit(config),
            dklen=config.keyLength,
        )
    except (ValueError, OverflowError, MemoryError) as e:
        raise InvalidParameters(f"scrypt rejected {config}") from e


__all__ = [
    "SALT_LENGTH",
    "deriveKey",
]
