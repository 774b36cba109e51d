"""Render a template whose asset links come from a fingerprint manifest.

Inside the template ``{{rev "css/app.css"}}`` expands to the fingerprinted
name recorded for ``css/app.css``; unknown paths expand to an empty string.
Every other entry of the source tree is copied through unchanged, except the
template and the manifest themselves.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import Any

from .base import TreeWriter
from .config import RewriteConfig
from .errors import TemplateNotFoundError
from .fsutil import copy_preserve, ensure_dir, glob_list, tree_path
from .manifest import Manifest, load_manifest
from .render import render_template

logger = logging.getLogger(__name__)


def _read_template(path: str) -> str:
    try:
        # Undecodable bytes become U+FFFD rather than failing the run.
        with open(path, encoding="utf-8", errors="replace") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise TemplateNotFoundError(path) from exc


def rev_helpers(manifest: Manifest) -> dict:
    def rev(path):
        return manifest.get(path)

    return {"rev": rev}


def rewrite_tree(src_dir: str, dest_dir: str, config: RewriteConfig) -> None:
    src_template_file = tree_path(src_dir, config.input_file)
    src_manifest_file = tree_path(src_dir, config.manifest_file)

    manifest = load_manifest(src_manifest_file)
    template = _read_template(src_template_file)

    rendered = render_template(
        template, dict(config.context), rev_helpers(manifest), config.template_engine
    )
    dest_output_file = tree_path(dest_dir, config.output_file)
    ensure_dir(os.path.dirname(dest_output_file))
    with open(dest_output_file, "w", encoding="utf-8") as f:
        f.write(rendered)
    logger.info("Rendered %s to %s", src_template_file, dest_output_file)

    copied = 0
    for rel_path in glob_list(config.patterns, src_dir):
        src_file = tree_path(src_dir, rel_path)
        if src_file in (src_template_file, src_manifest_file):
            continue

        st = os.lstat(src_file)
        if not (stat.S_ISREG(st.st_mode) or stat.S_ISLNK(st.st_mode)):
            continue

        dest_file = os.path.join(dest_dir, rel_path)
        ensure_dir(os.path.dirname(dest_file))
        copy_preserve(src_file, dest_file, st)
        copied += 1

    logger.info("Copied %d entries from %s into %s", copied, src_dir, dest_dir)


class Rewriter(TreeWriter):
    """Tree writer rendering one template against a manifest."""

    def __init__(self, input_tree: Any, config: RewriteConfig) -> None:
        super().__init__(input_tree)
        self.config = config

    def produce(self, src_dir: str, dest_dir: str) -> None:
        rewrite_tree(src_dir, dest_dir, self.config)
