"""Error kinds raised while fingerprinting or rewriting a tree.

Filesystem failures are not wrapped: they surface as the builtin
:class:`OSError` raised by the failing call.  Template syntax problems are
reported by the template engine, as :class:`pybars.PybarsError` or
:class:`jinja2.TemplateSyntaxError`, and passed through unmodified.
"""

from __future__ import annotations

from jinja2 import TemplateSyntaxError
from pybars import PybarsError


class RevError(Exception):
    """Base class for errors raised by :mod:`assetrev`."""


class HashError(RevError):
    """File content could not be read while computing its hash."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not hash {path}: {reason}")
        self.path = path


class ManifestParseError(RevError, ValueError):
    """The manifest document is missing or is not a flat JSON object."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid manifest {path}: {reason}")
        self.path = path


class TemplateNotFoundError(RevError, FileNotFoundError):
    """The configured template is absent from the source tree."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Template {path} not found")
        self.path = path


__all__ = [
    "HashError",
    "ManifestParseError",
    "PybarsError",
    "RevError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
]
