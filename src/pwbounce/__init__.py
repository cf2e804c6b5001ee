"""
Salted, versioned, self-describing password hashes.
"""

from ._codec import (
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
    ScryptData,
    decode,
    encode,
)
from ._config import DEFAULT_COST_EXPONENT, DEFAULT_SCRYPT_CONFIG, ScryptConfig
from ._engine import ScryptPasswordEngine, defaultSecureEngine
from ._errors import (
    HashSyntaxError,
    InsufficientEntropy,
    InvalidParameters,
    PasswordHashError,
    PasswordMismatchError,
    VersionError,
)
from ._interfaces import IHasher, IValidator, PasswordEngine
from ._scrypt import (
    ScryptHasher,
    ScryptValidator,
    defaultHasher,
    defaultValidator,
)
from ._util import compareHashes, generateSalt, integerPower
from ._version import __version__ as _incremental_version


__all__ = (
    "CURRENT_VERSION",
    "DEFAULT_COST_EXPONENT",
    "DEFAULT_SCRYPT_CONFIG",
    "HashSyntaxError",
    "IHasher",
    "IValidator",
    "InsufficientEntropy",
    "InvalidParameters",
    "PasswordEngine",
    "PasswordHashError",
    "PasswordMismatchError",
    "SUPPORTED_VERSIONS",
    "ScryptConfig",
    "ScryptData",
    "ScryptHasher",
    "ScryptPasswordEngine",
    "ScryptValidator",
    "VersionError",
    "__author__",
    "__copyright__",
    "__license__",
    "__version__",
    "compareHashes",
    "decode",
    "defaultHasher",
    "defaultSecureEngine",
    "defaultValidator",
    "encode",
    "generateSalt",
    "integerPower",
)


__version__ = _incremental_version.base()

__author__ = "The pwbounce contributors"
__license__ = "MIT"
__copyright__ = f"Copyright 2026 {__author__}"
