# src/catlite/__init__.py
"""Concatenate files and print them to stdout, with optional line numbers."""

__version__ = "0.1.0"
