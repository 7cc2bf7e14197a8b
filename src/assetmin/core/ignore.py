# src/assetmin/core/ignore.py
import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from assetmin.config import DEFAULT_IGNORE_PATTERNS, IGNORE_FILE_NAME


def find_ignore_file(root_dir: Path) -> Optional[Path]:
    """Returns the .minifyignore sitting at the top of a walked directory, if any."""
    candidate = Path(root_dir) / IGNORE_FILE_NAME
    return candidate if os.path.isfile(candidate) else None


def load_ignore_spec(
    ignore_file: Optional[Path] = None,
    extra_patterns: Optional[Iterable[str]] = None,
    use_defaults: bool = True,
) -> pathspec.PathSpec:
    """
    Builds a PathSpec from the default patterns, an optional ignore file
    (gitignore syntax) and any patterns given on the command line.
    """
    lines: List[str] = list(DEFAULT_IGNORE_PATTERNS) if use_defaults else []

    if ignore_file is not None and os.path.exists(ignore_file):
        try:
            with open(ignore_file, "r", encoding="utf-8") as f:
                lines.extend(f.read().splitlines())
        except (OSError, UnicodeDecodeError) as e:
            print(f"Warning: Could not read {ignore_file}: {e}", file=sys.stderr)

    if extra_patterns:
        lines.extend(extra_patterns)

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except Exception as e:
        print(f"Error parsing ignore rules: {e}", file=sys.stderr)
        return pathspec.PathSpec.from_lines("gitwildmatch", [])


def is_path_ignored(rel_path: Path, spec: Optional[pathspec.PathSpec], is_directory: bool = False) -> bool:
    """Matches a root-relative path; directories are tested with a trailing slash."""
    if spec is None:
        return False
    candidate = Path(rel_path).as_posix()
    if is_directory:
        candidate += "/"
    return spec.match_file(candidate)
