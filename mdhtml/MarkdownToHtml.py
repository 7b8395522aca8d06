import logging

from marko import Markdown

from .exceptions import ConfigurationError, ConversionError
from .extensions import RenderFlags
from .marko_adapter import AbbreviationTable, make_extension

logger = logging.getLogger('mdhtml')


class MarkdownToHtml:
    """Render engine: Markdown to HTML through Marko.

    One instance keeps per-document state (the Marko parser and renderer,
    and the abbreviation table) between parse and render, so a single
    instance must not render two documents at the same time.
    """

    def __init__(self, flags=RenderFlags.NONE):
        self.flags = RenderFlags(flags)
        self.abbreviations = AbbreviationTable()

        extensions = []
        if self.flags & (RenderFlags.TABLES | RenderFlags.AUTOLINKS):
            extensions.append('gfm')
        # Registered last so its renderer mixin takes precedence over GFM's
        extensions.append(make_extension(self.flags, self.abbreviations))

        try:
            self.md = Markdown(extensions=extensions)
            # Marko loads extensions lazily; parse once to surface failures now
            self.md.parse('')
        except Exception as e:
            raise ConfigurationError(
                f"Failed to create render engine with flags {self.flags!r}: {e}"
            ) from e

        logger.debug("Created render engine: flags=%r, extensions=%s", self.flags, extensions)

    def markdown_to_html(self, text):
        """
        Convert Markdown text to HTML.

        Args:
            text: Markdown-formatted text

        Returns:
            HTML string

        Raises:
            ConversionError: If Marko fails on the input
        """
        if not text:
            return ""

        if self.flags & RenderFlags.ABBREVIATIONS:
            text = self.abbreviations.extract(text)

        try:
            return self.md.convert(text)
        except Exception as e:
            raise ConversionError(f"Markdown rendering failed: {e}") from e
