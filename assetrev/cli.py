"""Command line driver: ``python -m assetrev fingerprint|rewrite ...``."""

from __future__ import annotations

import argparse
import logging
import sys

from jinja2 import TemplateError
from pybars import PybarsError

from .config import FingerprintConfig, ManifestPlacement, RewriteConfig, TemplateEngine
from .errors import RevError
from .fingerprint import fingerprint_tree
from .rewrite import rewrite_tree

logger = logging.getLogger(__name__)


def _key_value(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m assetrev",
        description="Fingerprint asset trees and rewrite references to them.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    fp = sub.add_parser("fingerprint", help="Copy a tree under content-hashed names.")
    fp.add_argument("src")
    fp.add_argument("dest")
    fp.add_argument("--hash-length", type=int, default=None)
    fp.add_argument("--manifest-file", default=None)
    fp.add_argument(
        "--absolute-manifest",
        action="store_true",
        help="Write the manifest to --manifest-file as given instead of inside DEST.",
    )

    rw = sub.add_parser("rewrite", help="Render a template against a manifest.")
    rw.add_argument("src")
    rw.add_argument("dest")
    rw.add_argument("--input-file", required=True)
    rw.add_argument("--output-file", required=True)
    rw.add_argument("--manifest-file", default=None)
    rw.add_argument(
        "--template-engine",
        choices=[e.value for e in TemplateEngine],
        default=None,
        help="Template syntax (default: handlebars).",
    )
    rw.add_argument(
        "--context",
        type=_key_value,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template variable; may be repeated.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        if args.command == "fingerprint":
            config = FingerprintConfig.from_env(
                hash_length=args.hash_length,
                manifest_file=args.manifest_file,
                manifest_placement=(
                    ManifestPlacement.ABSOLUTE_PATH if args.absolute_manifest else None
                ),
            )
            fingerprint_tree(args.src, args.dest, config)
        else:
            config = RewriteConfig.from_env(
                args.input_file,
                args.output_file,
                manifest_file=args.manifest_file,
                context=dict(args.context),
                template_engine=args.template_engine,
            )
            rewrite_tree(args.src, args.dest, config)
    except (RevError, TemplateError, PybarsError, OSError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0
