"""Status line segments, update streams, control API and AI ticker tools."""

__version__ = "0.1.0"