import os
import stat

import pytest

from assetrev.fsutil import copy_preserve, ensure_dir, glob_list, tree_path


def test_tree_path_strips_leading_slash(tmp_path):
    assert tree_path(str(tmp_path), "/rev-manifest.json") == str(tmp_path / "rev-manifest.json")
    assert tree_path(str(tmp_path), "a/b.txt") == str(tmp_path / "a" / "b.txt")


def test_ensure_dir_is_idempotent(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    ensure_dir(str(target))
    ensure_dir(str(target))
    assert target.is_dir()


def test_glob_list_lists_everything_sorted(tmp_path, make_tree):
    make_tree(tmp_path, {"b.js": "b", "a/c.css": "c", ".hidden": "h"})
    assert glob_list(["**/*"], str(tmp_path)) == [".hidden", "a", "a/c.css", "b.js"]


def test_glob_list_filters_by_pattern(tmp_path, make_tree):
    make_tree(tmp_path, {"b.js": "b", "a/c.css": "c", "a/d/e.css": "e"})
    assert glob_list(["**/*.css"], str(tmp_path)) == ["a/c.css", "a/d/e.css"]
    assert glob_list(["*.js"], str(tmp_path)) == ["b.js"]


def test_glob_list_does_not_descend_symlinked_dirs(tmp_path, make_tree):
    make_tree(tmp_path, {"real/x.txt": "x"})
    os.symlink("real", tmp_path / "alias")
    assert glob_list(["**/*"], str(tmp_path)) == ["alias", "real", "real/x.txt"]


def test_glob_list_missing_root(tmp_path):
    with pytest.raises(OSError):
        glob_list(["**/*"], str(tmp_path / "missing"))


def test_copy_preserve_keeps_mode(tmp_path):
    src = tmp_path / "run.sh"
    src.write_text("#!/bin/sh\n")
    src.chmod(0o751)
    dest = tmp_path / "out.sh"

    copy_preserve(str(src), str(dest), os.lstat(src))

    assert dest.read_text() == "#!/bin/sh\n"
    assert stat.S_IMODE(dest.stat().st_mode) == 0o751


def test_copy_preserve_recreates_symlink(tmp_path):
    link = tmp_path / "link"
    os.symlink("../somewhere/else", link)
    dest = tmp_path / "copy"

    copy_preserve(str(link), str(dest))

    assert dest.is_symlink()
    assert os.readlink(dest) == "../somewhere/else"


def test_copy_preserve_replaces_existing_symlink(tmp_path):
    link = tmp_path / "link"
    os.symlink("new-target", link)
    dest = tmp_path / "copy"
    os.symlink("old-target", dest)

    copy_preserve(str(link), str(dest))

    assert os.readlink(dest) == "new-target"
