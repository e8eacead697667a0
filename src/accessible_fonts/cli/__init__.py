"""Command-line interface for accessible_fonts.

This module provides the CLI using Typer with rich output for
inspecting the catalog and checking font resources.

Key features:
- Family and weight listings
- Variant resolution preview
- Resource validation and registration reports
- License and attribution display
"""

from accessible_fonts.cli.app import cli, main

__all__ = ["cli", "main"]
