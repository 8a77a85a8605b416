"""Download accepted texture submissions and credit their authors."""

__version__ = "1.0.0"
