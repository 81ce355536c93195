"""Classic algorithms and data structures with step-by-step interactive commands."""

__version__ = "0.1.0"