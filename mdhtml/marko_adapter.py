from __future__ import annotations
import html
import re

from marko import block, inline
from marko.ext.gfm import elements as gfm_elements
from marko.helpers import MarkoExtension

from .extensions import RenderFlags
from .smartypants import educate_punctuation, educate_quotes


class AbbreviationTable:
    """Abbreviation definitions of the document being rendered.

    Definitions use the ``*[HTML]: Hyper Text Markup Language`` syntax.
    They are removed from the source before Marko parses it, and every
    whole-word occurrence of a defined abbreviation is wrapped in an
    ``<abbr>`` element while rendering text.
    """

    DEFINITION_RE = re.compile(r'^ {0,3}\*\[([^\]]+)\]:[ \t]*(.*?)[ \t]*(?:\n|$)', re.M)

    def __init__(self):
        self.titles = {}
        self._pattern = None

    def __bool__(self):
        return bool(self.titles)

    def extract(self, markdown_text: str) -> str:
        """Collect the definitions and return the text without them."""
        self.titles = {}
        for match in self.DEFINITION_RE.finditer(markdown_text):
            self.titles[html.escape(match.group(1).strip())] = match.group(2)

        self._pattern = None
        if self.titles:
            # Longest first so "HTML5" wins over "HTML"
            names = sorted(self.titles, key=len, reverse=True)
            self._pattern = re.compile(
                r'(?<!\w)(%s)(?!\w)' % '|'.join(re.escape(n) for n in names)
            )
        return self.DEFINITION_RE.sub('', markdown_text)

    def mark(self, escaped_text: str) -> str:
        """Wrap abbreviations found in already escaped text."""
        if self._pattern is None:
            return escaped_text
        return self._pattern.sub(self._abbr, escaped_text)

    def _abbr(self, match):
        name = match.group(1)
        title = html.escape(self.titles[name])
        return f'<abbr title="{title}">{name}</abbr>'


# Stand-ins registered over Marko/GFM elements to switch a syntax off.
# They keep the name of the element they replace and never match.

class FencedCode(block.FencedCode):
    override = True

    @classmethod
    def match(cls, source):
        return False


class Table(gfm_elements.Table):
    override = True

    @classmethod
    def match(cls, source):
        return False


class Url(gfm_elements.Url):
    override = True

    @classmethod
    def find(cls, text, *args, **kwargs):
        return iter(())


DEFINITION_MARKER_RE = re.compile(r'^:[ \t]+')


def _split_lines(children):
    """Split paragraph inlines into lines at line breaks."""
    lines = [[]]
    for child in children:
        if isinstance(child, inline.LineBreak):
            lines.append([])
        else:
            lines[-1].append(child)
    return [line for line in lines if line]


def _is_definition(line) -> bool:
    first = line[0]
    return (isinstance(first, inline.RawText)
            and isinstance(first.children, str)
            and bool(DEFINITION_MARKER_RE.match(first.children)))


def _definition_entries(children):
    """Return ``[(is_definition, line), ...]`` for a definition list paragraph.

    A paragraph is a definition list when it starts with a term line and
    contains at least one ``: definition`` line. Returns None otherwise.
    """
    lines = _split_lines(children)
    if len(lines) < 2 or _is_definition(lines[0]):
        return None
    entries = [(_is_definition(line), line) for line in lines]
    if not any(is_def for is_def, _ in entries):
        return None
    return entries


def make_extension(flags, abbreviations=None):
    """Build the Marko extension implementing the given render flags.

    Args:
        flags: RenderFlags of the engine
        abbreviations: AbbreviationTable shared with the owning engine

    Returns:
        MarkoExtension to be registered after ``gfm``
    """
    flags = RenderFlags(flags)
    if abbreviations is None:
        abbreviations = AbbreviationTable()

    elements = []
    if not flags & RenderFlags.FENCED_CODE_BLOCKS:
        elements.append(FencedCode)
    # 'gfm' brings tables and autolinks together; turn off the unwanted one
    if flags & RenderFlags.AUTOLINKS and not flags & RenderFlags.TABLES:
        elements.append(Table)
    if flags & RenderFlags.TABLES and not flags & RenderFlags.AUTOLINKS:
        elements.append(Url)

    rewrites_text = bool(flags & (RenderFlags.SMARTYPANTS | RenderFlags.ABBREVIATIONS))

    class RenderFlagsRendererMixin:

        def render_raw_text(self, element):
            if not rewrites_text or not isinstance(element.children, str):
                return super().render_raw_text(element)
            return self.format_text(element.children)

        def format_text(self, text):
            if flags & RenderFlags.QUOTES:
                text = educate_quotes(text)
            if flags & RenderFlags.SMARTS:
                text = educate_punctuation(text)
            escaped = self.escape_html(text)
            if flags & RenderFlags.ABBREVIATIONS:
                escaped = abbreviations.mark(escaped)
            return escaped

        def render_line_break(self, element):
            if flags & RenderFlags.HARDWRAPS and element.soft:
                return '<br />\n'
            return super().render_line_break(element)

        def render_html_block(self, element):
            if flags & RenderFlags.SUPPRESS_HTML_BLOCKS:
                return ''
            return super().render_html_block(element)

        def render_inline_html(self, element):
            if flags & RenderFlags.SUPPRESS_INLINE_HTML:
                return ''
            return super().render_inline_html(element)

        def render_paragraph(self, element):
            if flags & RenderFlags.DEFINITIONS:
                entries = _definition_entries(element.children)
                if entries:
                    return self.render_definition_list(entries)
            return super().render_paragraph(element)

        def render_definition_list(self, entries):
            parts = ['<dl>']
            for is_definition, line in entries:
                if is_definition:
                    first = DEFINITION_MARKER_RE.sub('', line[0].children, count=1)
                    content = self.format_text(first)
                    content += ''.join(self.render(child) for child in line[1:])
                    parts.append(f'<dd>{content.strip()}</dd>')
                else:
                    content = ''.join(self.render(child) for child in line)
                    parts.append(f'<dt>{content.strip()}</dt>')
            parts.append('</dl>\n')
            return ''.join(parts)

    return MarkoExtension(elements=elements, renderer_mixins=[RenderFlagsRendererMixin])
