"""
Tokenwright - color design-token generation.

Builds a semantic color token system from primitive palettes: OKLCH tonal
scales, a slot-based naming grammar, state/scale expansion and WCAG
contrast checks, with exporters for common token formats.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ExportError, InvalidColorFormat, TokenSpecError, TokenwrightError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokenwrightError",
    "InvalidColorFormat",
    "TokenSpecError",
    "ExportError",
]
