"""HTML to Markdown convert engine using markdownify.

The engine keeps only its ``ConvertOptions``; every call builds a fresh
markdownify converter, so one engine can serve concurrent callers.
"""

import logging
from urllib.parse import urljoin

from markdownify import MarkdownConverter as BaseMarkdownConverter

from .exceptions import ConversionError
from .options import ConvertOptions, FencedCodeBlocks, Tables
from .smartypants import reverse_punctuation, reverse_quotes

logger = logging.getLogger('mdhtml')


def _indent(text, prefix='    '):
    return '\n'.join(prefix + line if line else line for line in text.split('\n'))


class _OptionsMarkdownConverter(BaseMarkdownConverter):
    """markdownify converter driven by ConvertOptions."""

    def __init__(self, convert_options, base_uri='', **options):
        self.convert_options = convert_options
        self.base_uri = base_uri
        self.abbreviations = {}
        # Same Markdown dialect the render engine reads
        options.setdefault('heading_style', 'atx')
        options.setdefault('bullets', '-')
        options.setdefault('strong_em_symbol', '*')
        options.setdefault('autolinks', convert_options.autolinks)
        super().__init__(**options)

    def convert(self, html):
        self.abbreviations = {}
        text = super().convert(html)

        if self.convert_options.reverses_quotes:
            text = reverse_quotes(text)
        if self.convert_options.reverses_punctuation:
            text = reverse_punctuation(text)

        text = text.strip('\n').rstrip()
        if self.abbreviations:
            definitions = '\n'.join(
                f'*[{name}]: {title}' for name, title in self.abbreviations.items()
            )
            text = f'{text}\n\n{definitions}' if text else definitions
        return text

    def _resolve(self, url):
        if url and self.base_uri:
            return urljoin(self.base_uri, url)
        return url

    def convert_a(self, el, text, parent_tags):
        if el.get('href'):
            el['href'] = self._resolve(el['href'])
        return super().convert_a(el, text, parent_tags)

    def convert_img(self, el, text, parent_tags):
        if el.get('src'):
            el['src'] = self._resolve(el['src'])
        return super().convert_img(el, text, parent_tags)

    def convert_abbr(self, el, text, parent_tags):
        title = el.get('title')
        name = text.strip()
        if self.convert_options.abbreviations and title and name:
            self.abbreviations.setdefault(name, title)
        return text

    def convert_br(self, el, text, parent_tags):
        if '_inline' in parent_tags:
            return ' '
        if self.convert_options.hardwraps:
            return '\n'
        return super().convert_br(el, text, parent_tags)

    def convert_dl(self, el, text, parent_tags):
        if '_inline' in parent_tags:
            return ' ' + text.strip() + ' '
        return '\n\n%s\n\n' % text.strip()

    def convert_dt(self, el, text, parent_tags):
        text = ' '.join(text.split())
        if '_inline' in parent_tags:
            return ' ' + text + ' '
        if self.convert_options.definition_lists:
            return '\n%s\n' % text
        return '\n\n%s\n\n' % text

    def convert_dd(self, el, text, parent_tags):
        text = text.strip()
        if '_inline' in parent_tags:
            return ' ' + text + ' '
        if self.convert_options.definition_lists:
            return ': %s\n' % text
        return '\n\n%s\n\n' % text

    def convert_pre(self, el, text, parent_tags):
        if not text:
            return ''
        code = text.strip('\n')

        language = ''
        code_el = el.find('code')
        if code_el is not None:
            for css_class in code_el.get('class') or []:
                if css_class.startswith('language-'):
                    language = css_class[len('language-'):]
                    break

        style = self.convert_options.fenced_code_blocks
        if style is FencedCodeBlocks.ENABLED_TILDE:
            return '\n\n~~~%s\n%s\n~~~\n\n' % (language, code)
        if style is FencedCodeBlocks.ENABLED_BACKTICK:
            return '\n\n```%s\n%s\n```\n\n' % (language, code)
        return '\n\n%s\n\n' % _indent(code)

    def convert_table(self, el, text, parent_tags):
        mode = self.convert_options.tables
        if mode is Tables.REMOVE:
            return ''
        if mode is Tables.LEAVE_AS_HTML:
            return '\n\n%s\n\n' % str(el)
        if mode is Tables.CONVERT_TO_CODE_BLOCK:
            return '\n\n%s\n\n' % _indent(text.strip())
        return super().convert_table(el, text, parent_tags)

    def convert_script(self, el, text, parent_tags):
        return ''

    def convert_style(self, el, text, parent_tags):
        return ''


class HtmlToMarkdown:
    """Convert engine: HTML fragments back to Markdown."""

    def __init__(self, options=None):
        self.options = options if options is not None else ConvertOptions.baseline()
        logger.debug("Created convert engine: %s", self.options)

    def convert_fragment(self, html, base_uri=''):
        """Convert an HTML fragment to Markdown.

        Args:
            html: HTML-formatted text
            base_uri: Base URL for relative links and images; empty to
                      leave them unchanged

        Returns:
            Markdown string

        Raises:
            ConversionError: If markdownify fails on the input
        """
        if not html:
            return ""

        try:
            converter = _OptionsMarkdownConverter(self.options, base_uri or '')
            return converter.convert(html)
        except Exception as e:
            raise ConversionError(f"HTML to Markdown conversion failed: {e}") from e
