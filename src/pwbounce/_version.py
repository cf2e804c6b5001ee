"""
Provides pwbounce version information.
"""

# This file is auto-generated! Do not edit!
# Use `python -m incremental.update pwbounce` to change this file.

from incremental import Version


__version__ = Version("pwbounce", 1, 0, 0)
__all__ = ["__version__"]
