"""Sample sources for RegKit."""

from regkit.io.samples import read_samples

__all__ = ["read_samples"]
