"""vendorctl — vendor remote ES modules into a local workspace."""

__version__ = "0.1.0"
