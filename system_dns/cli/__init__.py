"""
Command-line interface components.

This package contains the CLI entry point for the system DNS query.
"""

from .main import main

__all__ = ["main"]
