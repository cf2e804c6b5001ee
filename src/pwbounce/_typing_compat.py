"""
L{typing.ParamSpec} only arrived in Python 3.10, so older interpreters get it
from L{typing_extensions}.
"""
import sys


if sys.version_info >= (3, 10):
    from typing import ParamSpec, Protocol
else:
    from typing import TYPE_CHECKING

    from typing_extensions import Protocol

    if TYPE_CHECKING:
        from typing_extensions import ParamSpec
    else:
        from platform import python_implementation

        # PyPy 3.9 checks that Protocol's generic arguments are all TypeVars.
        if python_implementation() == "PyPy":
            from typing import TypeVar as ParamSpec
        else:
            from typing_extensions import ParamSpec


__all__ = [
    "Protocol",
    "ParamSpec",
]
