from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .errors import InputFileNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_ENCODING = "utf-8"


def require_file(path: PathLike) -> Path:
    p = Path(path)
    if not p.is_file():
        raise InputFileNotFoundError(str(path))
    return p


def read_text(path: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a whole file; OSError and UnicodeDecodeError reach the caller as-is."""
    text = Path(path).read_text(encoding=encoding)
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def write_text(path: PathLike, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Write (overwrite) a whole file."""
    Path(path).write_text(text, encoding=encoding)
    logger.debug("Wrote %d characters to %s", len(text), path)
