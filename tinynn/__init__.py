"""Tiny feed-forward neural networks stored as CSV files: generate, import and run them."""

__version__ = "0.1.0"