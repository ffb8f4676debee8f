"""Initializer - project instantiation from template directory trees.

Walks a template tree, renders directory names, file names and file contents
with Jinja2, and writes the result under a destination root.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
