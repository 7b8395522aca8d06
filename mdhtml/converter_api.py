"""
High-level convenience API for mdhtml.

Module-level functions backed by one process-wide ``MarkdownFacade``,
created on first use from ``DEFAULT_CONFIG``. Applications that need other
defaults call ``configure()`` once at startup, before the first conversion.
"""

import logging
import threading

from .config import ConversionConfig, DEFAULT_CONFIG
from .facade import MarkdownFacade

logger = logging.getLogger('mdhtml')

_facade = None
_facade_lock = threading.Lock()


def configure(config):
    """Install the process-wide facade built from ``config``.

    Args:
        config: ConversionConfig instance, or an application settings
                mapping accepted by ``ConversionConfig.from_mapping``

    Returns:
        The new MarkdownFacade
    """
    global _facade
    if not isinstance(config, ConversionConfig):
        config = ConversionConfig.from_mapping(config)
    with _facade_lock:
        _facade = MarkdownFacade(config)
    logger.debug("Configured process-wide Markdown facade")
    return _facade


def get_default_facade():
    """Return the process-wide facade, creating it on first use."""
    global _facade
    if _facade is None:
        with _facade_lock:
            if _facade is None:
                _facade = MarkdownFacade(DEFAULT_CONFIG)
    return _facade


def render(text, config=None):
    """Convert Markdown to HTML with the process-wide facade."""
    return get_default_facade().render(text, config)


def convert_back(html, base_uri='', config=None):
    """Convert HTML to Markdown with the process-wide facade."""
    return get_default_facade().convert_back(html, base_uri, config)


def sanitize(text, config=None):
    """Strip untrusted HTML from Markdown with the process-wide facade."""
    return get_default_facade().sanitize(text, config)
