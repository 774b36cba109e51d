"""Reading and writing the ``rev-manifest.json`` document.

The manifest is a flat JSON object mapping each original relative path to
its fingerprinted relative path, for example::

    {
      "css/app.css": "css/app-5d41402a.css"
    }
"""

from __future__ import annotations

import json
import logging
import os
from typing import Dict

from .errors import ManifestParseError
from .fsutil import ensure_dir

logger = logging.getLogger(__name__)

Manifest = Dict[str, str]


def dump_manifest(manifest: Manifest) -> str:
    return json.dumps(manifest, indent=2, ensure_ascii=False)


def write_manifest(manifest: Manifest, path: str) -> None:
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_manifest(manifest))
    logger.info("Wrote manifest with %d entries to %s", len(manifest), path)


def load_manifest(path: str) -> Manifest:
    """Load a manifest written by :func:`write_manifest`.

    Raises :class:`ManifestParseError` when the file is missing, is not JSON
    or is not an object of string values.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise ManifestParseError(path, "file not found") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(path, "expected a JSON object")
    bad = [k for k, v in data.items() if not isinstance(v, str)]
    if bad:
        raise ManifestParseError(path, f"non-string values for {bad}")
    logger.debug("Loaded manifest %s (%d entries)", path, len(data))
    return data
