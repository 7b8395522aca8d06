"""
Public Markdown/HTML operations.

``MarkdownFacade`` renders Markdown to HTML, converts HTML back to
Markdown, and sanitizes Markdown by running it through both directions.
Without a per-call configuration the shared default engines are used;
with one, a fresh pair of engines is built for that call only.
"""

from contextlib import nullcontext

from .cache import ConverterCache


class MarkdownFacade:

    def __init__(self, config=None):
        self.cache = ConverterCache(config)

    @property
    def config(self):
        return self.cache.config

    def render(self, text, config=None):
        """Convert Markdown to HTML.

        By default the shared engine is used, serialized by the cache's
        guard. With ``config`` (a capability mapping or ``CapabilitySet``,
        even an empty one) a new render engine is created for this call.

        Args:
            text: Markdown-formatted text
            config: Optional per-call capability configuration

        Returns:
            HTML-formatted text
        """
        resolved = self.cache.resolve(config) if config is not None else None
        return self._render(text, resolved)

    def convert_back(self, html, base_uri='', config=None):
        """Convert HTML back to Markdown.

        Relative links are resolved against ``base_uri``; when it is empty
        the configured default base URI is used instead.

        Args:
            html: HTML-formatted text
            base_uri: Override for the default base URI
            config: Optional per-call capability configuration; creates a
                    new convert engine for this call

        Returns:
            Markdown-formatted text
        """
        resolved = self.cache.resolve(config) if config is not None else None
        return self._convert_back(html, base_uri, resolved)

    def sanitize(self, text, config=None):
        """Strip untrusted HTML from Markdown.

        Runs the text through the render engine and back through the
        convert engine. Anything the round trip cannot represent, such as
        scripts and arbitrary tags, is dropped.

        Args:
            text: Markdown-formatted text
            config: Optional per-call capability configuration, used for
                    both directions

        Returns:
            Sanitized Markdown-formatted text
        """
        resolved = self.cache.resolve(config) if config is not None else None
        return self._convert_back(self._render(text, resolved), '', resolved)

    # ------------------------------------------------------------------

    def _render(self, text, resolved):
        if text is None:
            return ""
        if resolved is None:
            engine = self.cache.get_default_renderer()
            guard = self.cache.guard
        else:
            # Ephemeral engine owned by this call; nothing to serialize
            engine = self.cache.create_renderer(resolved)
            guard = nullcontext()

        with guard:
            return engine.markdown_to_html(str(text))

    def _convert_back(self, html, base_uri, resolved):
        if html is None:
            return ""
        if resolved is None:
            engine = self.cache.get_default_converter()
            default_base_uri = self.cache.default_base_uri
        else:
            engine = self.cache.create_converter(resolved)
            default_base_uri = resolved.base_uri

        effective = base_uri or ''
        if default_base_uri and not effective:
            effective = default_base_uri
        if effective and not effective.endswith('/'):
            effective += '/'

        return engine.convert_fragment(str(html), effective)
