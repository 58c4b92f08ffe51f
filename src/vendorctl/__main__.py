"""Allow ``python -m vendorctl``."""

from vendorctl.cli import cli

cli()
