"""Sample data input."""

from .loading import load_samples

__all__ = ["load_samples"]
