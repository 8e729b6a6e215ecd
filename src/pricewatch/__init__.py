"""Price and discount extraction for retail-monitoring agents."""

__version__ = "0.1.0"
