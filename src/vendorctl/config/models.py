"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, vendorctl.toml only contains
overrides. A fresh workspace needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from vendorctl import __version__

# --- vendorctl.toml sections ---


class VendorConfig(BaseModel):
    """[vendor] section."""

    model_config = {"frozen": True}

    dir: str = "vendor"
    manifest: str = "vendorctl.json"


class NetworkConfig(BaseModel):
    """[network] section."""

    model_config = {"frozen": True}

    timeout_seconds: float = 30.0
    user_agent: str = f"vendorctl/{__version__}"
