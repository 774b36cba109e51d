"""Filesystem helpers shared by the fingerprinter and the rewriter."""

from __future__ import annotations

import os
import shutil
import stat
from fnmatch import fnmatchcase
from typing import Iterable


def tree_path(root: str, rel_path: str) -> str:
    """Join ``rel_path`` onto ``root``.

    A leading ``/`` in ``rel_path`` refers to the tree root rather than the
    filesystem root, so ``tree_path("dist", "/rev-manifest.json")`` is
    ``dist/rev-manifest.json``.
    """
    return os.path.normpath(os.path.join(root, rel_path.lstrip("/")))


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def copy_preserve(src: str, dest: str, st: os.stat_result | None = None) -> None:
    """Copy a regular file or recreate a symlink at ``dest``.

    Permission bits and timestamps of regular files are kept.  Symlinks are
    recreated with the same target string and are never dereferenced.
    """
    if st is None:
        st = os.lstat(src)
    if os.path.islink(dest) or (stat.S_ISLNK(st.st_mode) and os.path.lexists(dest)):
        os.unlink(dest)
    if stat.S_ISLNK(st.st_mode):
        os.symlink(os.readlink(src), dest)
    else:
        shutil.copy2(src, dest)


def _matches(rel_path: str, pattern: str) -> bool:
    if fnmatchcase(rel_path, pattern):
        return True
    # ``**/`` also matches entries at the root.
    return pattern.startswith("**/") and fnmatchcase(rel_path, pattern[3:])


def glob_list(patterns: Iterable[str], root: str) -> list[str]:
    """Return sorted POSIX-style relative paths under ``root`` matching ``patterns``.

    Files, directories and symlinks are all listed, hidden entries included.
    Symlinks to directories are listed as entries but not descended into.
    """
    patterns = list(patterns)
    if not os.path.isdir(root):
        raise NotADirectoryError(f"Source tree {root} is not a directory")

    def _raise(exc: OSError) -> None:
        raise exc

    entries = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        rel_dir = os.path.relpath(dirpath, root)
        for name in dirnames + filenames:
            rel_path = name if rel_dir == "." else os.path.join(rel_dir, name)
            rel_path = rel_path.replace(os.sep, "/")
            if any(_matches(rel_path, p) for p in patterns):
                entries.append(rel_path)
    return sorted(entries)
