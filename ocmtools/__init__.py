"""Building blocks for multi-cluster hub and managed-cluster administration tools."""

__version__ = "0.1.0"