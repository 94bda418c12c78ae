"""filekit - path normalization and filtered directory walking."""

__version__ = "0.4.0"
