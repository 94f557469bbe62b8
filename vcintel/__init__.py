"""VC company intelligence backend: listing engine and enrichment contract."""

__version__ = "0.1.0"
