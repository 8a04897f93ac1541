"""Driver and command-frame helpers for the GM65 barcode scanner module."""

__version__ = "1.0.0"
__all__ = ["protocol", "scanner"]