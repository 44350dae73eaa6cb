"""Responsive bar chart renderer."""

__version__ = "0.1.0"
