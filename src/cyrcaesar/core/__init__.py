from .errors import CipherError, InputFileNotFoundError, InvalidKeyError, MissingSampleError
from .results import SolveResult, TextFeatures

__all__ = [
    "CipherError",
    "InputFileNotFoundError",
    "InvalidKeyError",
    "MissingSampleError",
    "SolveResult",
    "TextFeatures",
]
