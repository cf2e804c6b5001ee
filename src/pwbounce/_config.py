# -*- test-case-name: pwbounce.test.test_config -*-
from __future__ import annotations

from copy import copy
from typing import Optional

from attrs import evolve, field, frozen
from attrs.validators import instance_of

from ._util import integerPower


# Costs are handed to the key derivation function as signed 64-bit integers.
MAX_COST = 2**63 - 1
DEFAULT_COST_EXPONENT = 16


def costIsRepresentable(costExponent: int) -> bool:
    """
    Does C{2 ** costExponent} fit in a positive signed 64-bit integer?
    """
    if not 0 <= costExponent < 64:
        return False
    return integerPower(2, costExponent) <= MAX_COST


@frozen
class ScryptConfig:
    """
    Cost parameters for scrypt.

    The CPU/memory cost is stored as an exponent, so only powers of two can
    be expressed.  If the requested exponent does not yield a representable
    cost, L{DEFAULT_COST_EXPONENT} is used instead and the requested value is
    kept in C{rejectedExponent} so that the caller can report it.

    @ivar costExponent: scrypt's C{N} is C{2 ** costExponent}.
    @ivar blockSize: scrypt's C{r}.
    @ivar parallelism: scrypt's C{p}.
    @ivar keyLength: Length of the derived key, in bytes.
    @ivar rejectedExponent: The exponent that was asked for if it had to be
        replaced, otherwise L{None}.
    """

    costExponent: int = field(validator=instance_of(int))
    blockSize: int = field(validator=instance_of(int))
    parallelism: int = field(validator=instance_of(int))
    keyLength: int = field(validator=instance_of(int))
    rejectedExponent: Optional[int] = field(init=False, default=None, eq=False)

    def __attrs_post_init__(self) -> None:
        if not costIsRepresentable(self.costExponent):
            object.__setattr__(self, "rejectedExponent", self.costExponent)
            object.__setattr__(self, "costExponent", DEFAULT_COST_EXPONENT)

    @property
    def cost(self) -> int:
        """
        scrypt's C{N} parameter.
        """
        return integerPower(2, self.costExponent)

    @property
    def substituted(self) -> bool:
        """
        Was the requested cost exponent replaced by the default?
        """
        return self.rejectedExponent is not None

    def withExponent(self, costExponent: int) -> ScryptConfig:
        """
        Create a new config that differs from this one only in its cost.
        """
        return evolve(self, costExponent=costExponent)

    def clone(self) -> ScryptConfig:
        return copy(self)

    def __str__(self) -> str:
        return (
            f"ScryptConfig(costExponent={self.costExponent}, "
            f"blockSize={self.blockSize}, parallelism={self.parallelism}, "
            f"keyLength={self.keyLength})"
        )


DEFAULT_SCRYPT_CONFIG = ScryptConfig(DEFAULT_COST_EXPONENT, 8, 1, 64)


__all__ = [
    "DEFAULT_COST_EXPONENT",
    "DEFAULT_SCRYPT_CONFIG",
    "MAX_COST",
    "ScryptConfig",
    "costIsRepresentable",
]
