"""Two-line element sets, Julian dates, Earth coordinate frames and simple orbit models."""

__version__ = "0.1.0"

__all__ = ["constants", "vector", "julian", "exceptions", "coord", "site", "tle", "models"]