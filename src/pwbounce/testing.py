# -*- test-case-name: pwbounce.test.test_testing -*-
"""
Unit testing support for L{pwbounce}.

In production, password hashing needs to be slow; these facilities use the
same code paths with cost parameters small enough not to slow down your
tests.  Never use them to hash a real password.
"""

from ._testing import cheapConfigForTesting, engineForTesting


__all__ = [
    "cheapConfigForTesting",
    "engineForTesting",
]
