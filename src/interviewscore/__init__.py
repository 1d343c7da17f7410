"""Stage-gated interview scoring and confidence aggregation."""

__version__ = "0.1.0"
