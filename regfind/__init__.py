"""regfind — registry lookup with inline color markup."""

__version__ = "0.1.0"
