"""wardist-cli: Command line interface for wardist."""

from __future__ import annotations

__version__ = "0.1.0"
