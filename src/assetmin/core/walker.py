# src/assetmin/core/walker.py
import os
import sys
from pathlib import Path
from typing import Iterator, Optional, Set

import pathspec

from assetmin.core.ignore import is_path_ignored
from assetmin.models import Classification, SourceFile


def classify(filename: str) -> Classification:
    """Decides what to do with a file from its name alone (case-insensitive)."""
    name = filename.lower()
    if name.endswith(".js") and not name.endswith("-min.js"):
        return Classification.COMPILE
    if name.endswith(".css") and not name.endswith("-min.css"):
        return Classification.COMPRESS
    return Classification.SKIP


def walk(path: Path, ignore_spec: Optional[pathspec.PathSpec] = None) -> Iterator[SourceFile]:
    """
    Yields a classified SourceFile for every file under `path`, depth-first.

    A path that is not a directory is yielded as-is, even if it does not exist,
    so the caller can report it. Directory symlinks are followed, but a
    directory is entered at most once.
    """
    root = Path(path)
    # os.path.isdir reports False instead of raising when the path cannot be stat'ed
    if not os.path.isdir(root):
        yield SourceFile(root, classify(root.name))
        return

    visited: Set[str] = set()
    stack = [root]
    while stack:
        directory = stack.pop()
        real = os.path.realpath(directory)
        if real in visited:
            continue
        visited.add(real)

        try:
            entries = list(os.scandir(directory))
        except OSError as e:
            print(f"  > [Warning] Skipping {directory} (read error: {e})", file=sys.stderr)
            continue

        subdirs = []
        for entry in entries:
            entry_path = Path(entry.path)
            rel_path = entry_path.relative_to(root)
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False

            if is_path_ignored(rel_path, ignore_spec, is_directory=is_dir):
                continue

            if is_dir:
                subdirs.append(entry_path)
            else:
                yield SourceFile(entry_path, classify(entry.name))

        # reversed so subdirectories are visited in listing order
        stack.extend(reversed(subdirs))
