"""
tokenwright CLI package.

- app.py: Main typer app and entry point
- project.py: init, validate and generate commands
- color.py: scale, contrast and convert commands
- utils.py: Shared utilities
"""

from tokenwright.cli.app import app, main
from tokenwright.cli.utils import configure_logging, version_callback

__all__ = [
    "app",
    "main",
    "configure_logging",
    "version_callback",
]
