# -*- test-case-name: pwbounce.test.test_testing -*-

from typing import Optional
from unittest import TestCase

from ._config import ScryptConfig
from ._engine import ScryptPasswordEngine
from ._scrypt import ScryptHasher


def cheapConfigForTesting() -> ScryptConfig:
    """
    Cost parameters that make scrypt fast enough to run many times in a test
    suite, and far too weak for anything else.
    """
    return ScryptConfig(4, 8, 1, 32)


cacheAttribute = "__insecurePasswordEngine__"


def engineForTesting(testCase: TestCase) -> ScryptPasswordEngine:
    """
    Return a password engine using L{cheapConfigForTesting}, suitable for using
    in unit tests.

    @param testCase: The test case for which this engine is to be used.  The
        engine will be cached on the test case, so that multiple calls will
        return the same object.
    """
    result: Optional[ScryptPasswordEngine] = getattr(
        testCase, cacheAttribute, None
    )
    if result is None:
        result = ScryptPasswordEngine(ScryptHasher(cheapConfigForTesting()))
        setattr(testCase, cacheAttribute, result)
    return result
