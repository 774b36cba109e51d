"""Configuration for the fingerprinter and the rewriter.

Each component takes an immutable config object.  Defaults are applied once
when the object is created.  ``from_env`` constructors fill unspecified
fields from ``REV__*`` environment variables, e.g. ``REV__HASH_LENGTH=12``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple

DEFAULT_HASH_LENGTH = 8
DEFAULT_MANIFEST_FILE = "/rev-manifest.json"
DEFAULT_PATTERNS: Tuple[str, ...] = ("**/*",)


def _env(name: str, default: str | None = None) -> str | None:
    """Fetch configuration values using ``rev.foo`` style names.

    ``rev.hash_length`` is read from ``REV__HASH_LENGTH``.
    """

    return os.getenv(name.replace(".", "__").upper(), default)


class ManifestPlacement(str, Enum):
    IN_DESTINATION_TREE = "in-destination-tree"
    ABSOLUTE_PATH = "absolute-path"


class TemplateEngine(str, Enum):
    HANDLEBARS = "handlebars"
    JINJA2 = "jinja2"


@dataclass(frozen=True)
class FingerprintConfig:
    hash_length: int = DEFAULT_HASH_LENGTH
    manifest_file: str = DEFAULT_MANIFEST_FILE
    manifest_placement: ManifestPlacement = ManifestPlacement.IN_DESTINATION_TREE
    patterns: Tuple[str, ...] = DEFAULT_PATTERNS

    def __post_init__(self) -> None:
        if isinstance(self.hash_length, bool) or not isinstance(self.hash_length, int):
            raise ValueError(f"hash_length must be an integer, got {self.hash_length!r}")
        if self.hash_length < 1:
            raise ValueError(f"hash_length must be at least 1, got {self.hash_length}")
        if not self.manifest_file:
            raise ValueError("manifest_file must not be empty")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(
            self, "manifest_placement", ManifestPlacement(self.manifest_placement)
        )
        object.__setattr__(self, "patterns", tuple(self.patterns))

    @classmethod
    def from_env(cls, **overrides: Any) -> "FingerprintConfig":
        values: dict[str, Any] = {
            "hash_length": int(_env("rev.hash_length", str(DEFAULT_HASH_LENGTH))),
            "manifest_file": _env("rev.manifest_file", DEFAULT_MANIFEST_FILE),
            "manifest_placement": _env(
                "rev.manifest_placement", ManifestPlacement.IN_DESTINATION_TREE.value
            ),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


@dataclass(frozen=True)
class RewriteConfig:
    input_file: str
    output_file: str
    manifest_file: str = DEFAULT_MANIFEST_FILE
    context: Mapping[str, Any] = field(default_factory=dict)
    patterns: Tuple[str, ...] = DEFAULT_PATTERNS
    template_engine: TemplateEngine = TemplateEngine.HANDLEBARS

    def __post_init__(self) -> None:
        if not self.input_file:
            raise ValueError("input_file is required")
        if not self.output_file:
            raise ValueError("output_file is required")
        if not self.manifest_file:
            raise ValueError("manifest_file must not be empty")
        object.__setattr__(self, "context", MappingProxyType(dict(self.context or {})))
        object.__setattr__(self, "template_engine", TemplateEngine(self.template_engine))
        object.__setattr__(self, "patterns", tuple(self.patterns))

    @classmethod
    def from_env(cls, input_file: str, output_file: str, **overrides: Any) -> "RewriteConfig":
        values: dict[str, Any] = {
            "manifest_file": _env("rev.manifest_file", DEFAULT_MANIFEST_FILE),
            "template_engine": _env("rev.template_engine", TemplateEngine.HANDLEBARS.value),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(input_file=input_file, output_file=output_file, **values)
