"""Rename every file in a tree after its content hash.

``css/app.css`` becomes ``css/app-<hash>.css`` in the destination tree and
the mapping between the two names is recorded in a JSON manifest.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from .base import TreeWriter
from .config import FingerprintConfig, ManifestPlacement
from .fsutil import copy_preserve, ensure_dir, glob_list, tree_path
from .hashing import add_suffix_before_ext, hash_entry
from .manifest import Manifest, write_manifest

logger = logging.getLogger(__name__)


def manifest_destination(config: FingerprintConfig, dest_dir: str) -> str:
    if config.manifest_placement is ManifestPlacement.ABSOLUTE_PATH:
        return config.manifest_file
    return tree_path(dest_dir, config.manifest_file)


def fingerprint_tree(src_dir: str, dest_dir: str, config: FingerprintConfig | None = None) -> Manifest:
    """Copy ``src_dir`` to ``dest_dir`` under fingerprinted names.

    Returns the manifest after writing it.  Entries that are neither regular
    files nor symlinks are skipped.
    """
    config = config or FingerprintConfig()
    manifest: Manifest = {}

    for rel_path in glob_list(config.patterns, src_dir):
        src_file = os.path.join(src_dir, rel_path)
        st = os.lstat(src_file)
        digest = hash_entry(src_file, st)
        if digest is None:
            continue

        hashed_path = add_suffix_before_ext(rel_path, "-" + digest[: config.hash_length])
        dest_file = os.path.join(dest_dir, hashed_path)
        ensure_dir(os.path.dirname(dest_file))
        copy_preserve(src_file, dest_file, st)
        logger.debug("%s -> %s", rel_path, hashed_path)

        manifest[rel_path] = hashed_path

    write_manifest(manifest, manifest_destination(config, dest_dir))
    logger.info("Fingerprinted %d entries from %s into %s", len(manifest), src_dir, dest_dir)
    return manifest


class Fingerprinter(TreeWriter):
    """Tree writer producing fingerprinted assets and a manifest."""

    def __init__(self, input_tree: Any, config: FingerprintConfig | None = None) -> None:
        super().__init__(input_tree)
        self.config = config or FingerprintConfig()

    def produce(self, src_dir: str, dest_dir: str) -> None:
        fingerprint_tree(src_dir, dest_dir, self.config)
