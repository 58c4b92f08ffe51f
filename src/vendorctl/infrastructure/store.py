"""Manifest persistence — JSON file validated through pydantic.

File format::

    {
      "modules": [
        {"protocol": "https", "path": "deno.land/std", "version": "v0.50.0",
         "files": ["/path/mod.ts"]}
      ],
      "aliases": {"path.ts": "https://deno.land/std@v0.50.0/path/mod.ts"}
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from vendorctl.domain.errors import ManifestError
from vendorctl.domain.manifest import Manifest

if TYPE_CHECKING:
    from pathlib import Path

_ADAPTER = TypeAdapter(Manifest)


def load_manifest(path: Path) -> Manifest:
    """Read and validate the manifest at *path*."""
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        msg = f"manifest not found: {path} (run 'vendorctl init' first)"
        raise ManifestError(msg) from exc
    try:
        return _ADAPTER.validate_json(raw)
    except ValidationError as exc:
        msg = f"invalid manifest {path}: {exc.error_count()} error(s)\n{exc}"
        raise ManifestError(msg) from exc


def save_manifest(path: Path, manifest: Manifest) -> None:
    """Write *manifest* to *path* as indented JSON with a trailing newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(_ADAPTER.dump_json(manifest, indent=2) + b"\n")
