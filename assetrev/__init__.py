"""Content-hash fingerprinting of asset trees and manifest-driven rewriting."""

from .config import FingerprintConfig, ManifestPlacement, RewriteConfig, TemplateEngine
from .errors import (
    HashError,
    ManifestParseError,
    PybarsError,
    RevError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from .fingerprint import Fingerprinter, fingerprint_tree
from .rewrite import Rewriter, rewrite_tree

__all__ = [
    "FingerprintConfig",
    "Fingerprinter",
    "HashError",
    "ManifestParseError",
    "ManifestPlacement",
    "PybarsError",
    "RevError",
    "RewriteConfig",
    "Rewriter",
    "TemplateEngine",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "fingerprint_tree",
    "rewrite_tree",
]
