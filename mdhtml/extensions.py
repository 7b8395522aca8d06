"""
Render engine feature flags.

Each member switches on one Markdown syntax feature of the render engine.
Members can be combined with ``|`` and are what the render-side
customization hook receives and returns.
"""

from enum import IntFlag


class RenderFlags(IntFlag):
    NONE = 0

    # Typography
    SMARTS = 1 << 0                     # dashes, ellipses, apostrophes
    QUOTES = 1 << 1                     # single, double and angle quotes
    SMARTYPANTS = SMARTS | QUOTES

    # Syntax extensions
    ABBREVIATIONS = 1 << 2
    HARDWRAPS = 1 << 3                  # soft line breaks become <br />
    AUTOLINKS = 1 << 4                  # bare URLs become links
    TABLES = 1 << 5
    DEFINITIONS = 1 << 6
    FENCED_CODE_BLOCKS = 1 << 7

    # Raw HTML handling
    SUPPRESS_HTML_BLOCKS = 1 << 16
    SUPPRESS_INLINE_HTML = 1 << 17
    SUPPRESS_ALL_HTML = SUPPRESS_HTML_BLOCKS | SUPPRESS_INLINE_HTML

    ALL = (SMARTYPANTS | ABBREVIATIONS | HARDWRAPS | AUTOLINKS | TABLES
           | DEFINITIONS | FENCED_CODE_BLOCKS)
