from __future__ import annotations


class CipherError(ValueError):
    """Base class for validation failures raised before any text is processed."""


class InputFileNotFoundError(CipherError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Input file does not exist: {path}")
        self.path = path


class InvalidKeyError(CipherError):
    pass


class MissingSampleError(CipherError):
    pass
