"""
Command-line interface for elblog.
"""

from elblog.cli.main import cli

__all__ = ["cli"]
