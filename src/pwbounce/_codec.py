# -*- test-case-name: pwbounce.test.test_codec -*-
"""
The self-describing text format for scrypt hashes::

    $pwbounce-scrypt$v=1$ln=16,r=8,p=1,kl=64$<salt>$<key>

C{salt} and C{key} are standard base64 with the padding stripped, so none of
C{$}, C{,} or C{=} can occur inside them.  Stored hashes must stay decodable,
so this layout must not change within a version.
"""

from __future__ import annotations

from base64 import b64decode, b64encode
from binascii import Error as BinasciiError
from re import compile as compileRE
from typing import Union

from attrs import field, frozen

from ._config import ScryptConfig
from ._errors import HashSyntaxError, VersionError


MARKER = "pwbounce-scrypt"
CURRENT_VERSION = "1"
SUPPORTED_VERSIONS = (CURRENT_VERSION,)

sep = "$"

# No sign, no leading zeros, and short enough that int() stays cheap.
INT = "0|[1-9][0-9]{0,9}"
B64 = "[A-Za-z0-9+/]+"


def g(**names: str) -> str:
    [[name, expression]] = list(names.items())
    return f"(?P<{name}>{expression})"


versionRE = compileRE("v=" + g(version=INT))
parametersRE = compileRE(
    ",".join(
        [
            "ln=" + g(ln=INT),
            "r=" + g(r=INT),
            "p=" + g(p=INT),
            "kl=" + g(kl=INT),
        ]
    )
)
payloadRE = compileRE(B64)


def b64(raw: bytes) -> str:
    return b64encode(raw).decode("ascii").rstrip("=")


def unb64(text: str) -> bytes:
    """
    Decode unpadded base64, accepting only the canonical spelling of each
    value.
    """
    if not payloadRE.fullmatch(text) or len(text) % 4 == 1:
        raise HashSyntaxError("invalid base64 payload")
    try:
        raw = b64decode(text + "=" * (-len(text) % 4), validate=True)
    except BinasciiError:
        raise HashSyntaxError("invalid base64 payload") from None
    if b64(raw) != text:
        raise HashSyntaxError("invalid base64 payload")
    return raw


@frozen
class ScryptData:
    """
    The decoded contents of an encoded scrypt hash.
    """

    config: ScryptConfig
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)
    version: str = CURRENT_VERSION

    def encode(self) -> bytes:
        """
        Serialize to the stored form.  Callers must consider this opaque.
        """
        config = self.config
        parameters = (
            f"ln={config.costExponent},r={config.blockSize},"
            f"p={config.parallelism},kl={config.keyLength}"
        )
        return sep.join(
            [
                "",
                MARKER,
                f"v={self.version}",
                parameters,
                b64(self.salt),
                b64(self.key),
            ]
        ).encode("ascii")


def encode(config: ScryptConfig, salt: bytes, key: bytes) -> bytes:
    """
    Produce the stored form of a salt and derived key.
    """
    return ScryptData(config, salt, key).encode()


def decode(encoded: Union[bytes, str]) -> ScryptData:
    """
    Parse a value produced by L{encode}.

    @raise HashSyntaxError: if C{encoded} is malformed.
    @raise VersionError: if C{encoded} is well formed up to its version, but
        that version is not one of L{SUPPORTED_VERSIONS}.
    """
    if isinstance(encoded, bytes):
        try:
            text = encoded.decode("ascii")
        except UnicodeDecodeError:
            raise HashSyntaxError("hash is not ASCII") from None
    else:
        text = encoded
    fields = text.split(sep)
    if len(fields) < 3 or fields[0] != "" or fields[1] != MARKER:
        raise HashSyntaxError(f"not a {MARKER} hash")

    matched = versionRE.fullmatch(fields[2])
    if matched is None:
        raise HashSyntaxError("invalid version field")
    version = matched["version"]
    if version not in SUPPORTED_VERSIONS:
        raise VersionError(MARKER, SUPPORTED_VERSIONS, version)

    if len(fields) != 6:
        raise HashSyntaxError("wrong number of fields")
    _, _, _, parameters, encodedSalt, encodedKey = fields

    matched = parametersRE.fullmatch(parameters)
    if matched is None:
        raise HashSyntaxError("invalid parameter field")
    config = ScryptConfig(
        int(matched["ln"]),
        int(matched["r"]),
        int(matched["p"]),
        int(matched["kl"]),
    )
    if config.substituted:
        raise HashSyntaxError("cost exponent out of range")
    if 0 in (config.blockSize, config.parallelism, config.keyLength):
        raise HashSyntaxError("parameters must be positive")

    salt = unb64(encodedSalt)
    key = unb64(encodedKey)
    if len(key) != config.keyLength:
        raise HashSyntaxError("key length does not match parameters")
    return ScryptData(config, salt, key, version)


__all__ = [
    "CURRENT_VERSION",
    "MARKER",
    "SUPPORTED_VERSIONS",
    "ScryptData",
    "decode",
    "encode",
]
