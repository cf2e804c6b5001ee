from ._interfaces import IHasher, IValidator, PasswordEngine


__all__ = [
    "IHasher",
    "IValidator",
    "PasswordEngine",
]
