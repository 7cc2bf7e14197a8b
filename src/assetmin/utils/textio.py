# src/assetmin/utils/textio.py
import codecs
import os
import locale
from pathlib import Path
from typing import Optional


def resolve_charset(name: Optional[str] = None) -> str:
    """
    Returns the charset name to use for the whole run.
    Falls back to the platform default; raises LookupError for unknown names.
    """
    if not name:
        return codecs.lookup(locale.getpreferredencoding(False)).name
    codecs.lookup(name)
    return name


def read_text(path: Path, charset: str) -> Optional[str]:
    """Reads the whole file, or returns None if it is missing, a directory, or not decodable."""
    path = Path(path)
    if not os.path.isfile(path):
        return None
    try:
        # newline="" keeps line endings exactly as they are on disk
        with open(path, "r", encoding=charset, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return None


def write_text(path: Path, text: Optional[str], charset: str) -> bool:
    """Overwrites the file with `text`. Returns False if nothing could be written."""
    path = Path(path)
    if os.path.isdir(path):
        return False

    # Encode up front so an unencodable text never truncates the target.
    try:
        data = (text or "").encode(charset)
    except UnicodeEncodeError:
        return False

    try:
        with open(path, "wb") as f:
            f.write(data)
        return True
    except OSError:
        return False
