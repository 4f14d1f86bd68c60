"""
Zillow CLI

Call a Zillow operation from the command line and print the normalized result.
"""

from .commands import cli, main

__all__ = [
    "cli",
    "main",
]
