"""
mdhtml - Markdown <-> HTML conversion and Markdown sanitization

Renders Markdown to HTML with Marko, converts HTML back to Markdown with
markdownify, and keeps both directions configured from one set of
capability flags. Running text through both directions strips untrusted
HTML from user-authored Markdown.
"""

from .MarkdownToHtml import MarkdownToHtml
from .HtmlToMarkdown import HtmlToMarkdown
from .extensions import RenderFlags
from .options import ConvertOptions, FencedCodeBlocks, Tables
from .capabilities import CapabilitySet, ResolvedConfig
from .resolver import resolve
from .cache import ConverterCache
from .guard import ConcurrencyGuard
from .facade import MarkdownFacade
from .config import ConversionConfig, DEFAULT_CONFIG
from .exceptions import MarkdownError, ConfigurationError, ConversionError
from .converter_api import render, convert_back, sanitize, configure, get_default_facade

__version__ = "0.1.0"
__all__ = [
    "MarkdownToHtml",
    "HtmlToMarkdown",
    "RenderFlags",
    "ConvertOptions",
    "FencedCodeBlocks",
    "Tables",
    "CapabilitySet",
    "ResolvedConfig",
    "resolve",
    "ConverterCache",
    "ConcurrencyGuard",
    "MarkdownFacade",
    "ConversionConfig",
    "DEFAULT_CONFIG",
    "MarkdownError",
    "ConfigurationError",
    "ConversionError",
    "render",
    "convert_back",
    "sanitize",
    "configure",
    "get_default_facade",
]
