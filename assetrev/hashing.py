import hashlib
import os
import stat

from .errors import HashError

CHUNK_SIZE = 64 * 1024


def make_hash(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def hash_file(path: str) -> str:
    """Return the MD5 hex digest of the file at ``path``.

    Opening the file may raise :class:`OSError`; a failure once reading has
    started is reported as :class:`HashError`.
    """
    digest = hashlib.md5()
    with open(path, "rb") as f:
        try:
            for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
                digest.update(chunk)
        except OSError as exc:
            raise HashError(path, str(exc)) from exc
    return digest.hexdigest()


def hash_entry(path: str, st: os.stat_result) -> str | None:
    """Hash a tree entry according to its ``lstat`` kind.

    Regular files hash their bytes and symlinks hash the raw bytes of their target
    path.  Anything else yields ``None``.
    """
    if stat.S_ISREG(st.st_mode):
        return hash_file(path)
    if stat.S_ISLNK(st.st_mode):
        return make_hash(os.fsencode(os.readlink(path)))
    return None


def add_suffix_before_ext(rel_path: str, suffix: str) -> str:
    """Insert ``suffix`` before the extension of the last path segment."""
    head, sep, name = rel_path.rpartition("/")
    base, ext = os.path.splitext(name)
    return f"{head}{sep}{base}{suffix}{ext}"
