"""Command-line interface for linebreak.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Greedy or Knuth-Plass breaking of plain-text files
- Configurable width, direction, and glue limits
- Optional statistics summary
- Detailed error reporting
"""

from linebreak.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
