"""Reading source documents into plain text.

Supported formats:
- .txt: read as UTF-8
- .docx: raw text extracted with mammoth (paragraphs separated by blank lines)
"""
import logging
import zipfile
from pathlib import Path
from typing import Union

import mammoth

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".docx")


class DocumentError(ValueError):
    """Raised when a document cannot be turned into text."""


class UnsupportedFormatError(DocumentError):
    """Raised for file extensions the reader doesn't handle."""


def _read_txt(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _read_docx(path: Path) -> str:
    with open(path, "rb") as f:
        try:
            result = mammoth.extract_raw_text(f)
        except (zipfile.BadZipFile, KeyError, ValueError) as e:
            raise DocumentError(f"Could not extract text from {path}: {e}") from e

    for message in result.messages:
        logger.warning(f"{path}: {message}")

    return result.value


def read_document(path: Union[str, Path]) -> str:
    """Read a document and return its text.

    Args:
        path: Path to a .txt or .docx file

    Returns:
        Full document text

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnsupportedFormatError: If the extension is not supported
        DocumentError: If a .docx file cannot be parsed
    """
    path = Path(path)
    ext = path.suffix.lower()

    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Unsupported file format '{ext or path.name}'. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    if not path.exists():
        raise FileNotFoundError(f"Input file not found at {path}")

    logger.debug(f"Reading {ext} document {path}")

    if ext == ".docx":
        return _read_docx(path)

    return _read_txt(path)
