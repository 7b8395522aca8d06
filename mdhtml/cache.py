"""
Default engine cache.

Holds the shared default render and convert engines, built lazily and at
most once from the configured capability block, plus the guard that
serializes calls into the shared render engine. Custom per-call
configurations get throwaway engines and never touch the shared state.
"""

import logging
import threading

from .HtmlToMarkdown import HtmlToMarkdown
from .MarkdownToHtml import MarkdownToHtml
from .config import DEFAULT_CONFIG
from .guard import ConcurrencyGuard
from .resolver import resolve

logger = logging.getLogger('mdhtml')


class ConverterCache:

    def __init__(self, config=None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.guard = ConcurrencyGuard()

        self._init_lock = threading.Lock()
        self._defaults = None
        self._renderer = None
        self._converter = None

    def defaults(self):
        """Resolved settings of the shared engines, computed once."""
        if self._defaults is None:
            with self._init_lock:
                if self._defaults is None:
                    self._defaults = resolve(self.config.MARKDOWN, self.config.SERVER_URL)
                    logger.debug("Resolved default configuration: %s", self._defaults)
        return self._defaults

    @property
    def default_base_uri(self):
        return self.defaults().base_uri

    def get_default_renderer(self):
        """Return the shared render engine, creating it on first use.

        The returned engine is not thread-safe; callers must hold
        ``self.guard`` while rendering with it.
        """
        if self._renderer is None:
            defaults = self.defaults()
            with self._init_lock:
                if self._renderer is None:
                    self._renderer = MarkdownToHtml(defaults.render_flags)
        return self._renderer

    def get_default_converter(self):
        """Return the shared convert engine, creating it on first use."""
        if self._converter is None:
            defaults = self.defaults()
            with self._init_lock:
                if self._converter is None:
                    self._converter = HtmlToMarkdown(defaults.convert_options)
        return self._converter

    # --- Ephemeral engines for custom configurations ---

    def resolve(self, capabilities):
        """Resolve a per-call configuration without caching it."""
        return resolve(capabilities, self.config.SERVER_URL)

    @staticmethod
    def create_renderer(resolved):
        return MarkdownToHtml(resolved.render_flags)

    @staticmethod
    def create_converter(resolved):
        return HtmlToMarkdown(resolved.convert_options)
