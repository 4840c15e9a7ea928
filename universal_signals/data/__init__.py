"""Input normalization and file I/O helpers."""
