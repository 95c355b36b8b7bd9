"""Run a single named CI step through the host shell."""

__version__ = "0.1.0"
