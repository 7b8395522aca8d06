"""
Typographic substitutions shared by both conversion directions.

``educate_*`` turn ASCII punctuation into typographic characters while
rendering, ``reverse_*`` turn them back while converting HTML to Markdown.
"""

import re

# A quote is an opening quote at the start of the text or after
# whitespace, an opening bracket or a dash.
_OPENING_DOUBLE_RE = re.compile(r'(?:^|(?<=[\s(\[{–—-]))"')
_OPENING_SINGLE_RE = re.compile(r"(?:^|(?<=[\s(\[{–—-]))'")
_SPACED_ELLIPSIS_RE = re.compile(r'\. \. \.')

LDQUO = '“'
RDQUO = '”'
LSQUO = '‘'
RSQUO = '’'
LAQUO = '«'
RAQUO = '»'
NDASH = '–'
MDASH = '—'
HELLIP = '…'


def educate_quotes(text: str) -> str:
    """Replace straight quotes and ``<<``/``>>`` with typographic quotes."""
    text = _OPENING_DOUBLE_RE.sub(LDQUO, text)
    text = text.replace('"', RDQUO)
    text = _OPENING_SINGLE_RE.sub(LSQUO, text)
    text = text.replace("'", RSQUO)
    return text.replace('<<', LAQUO).replace('>>', RAQUO)


def educate_punctuation(text: str) -> str:
    """Replace ``---``, ``--``, ``...`` and apostrophes."""
    text = text.replace('---', MDASH).replace('--', NDASH)
    text = _SPACED_ELLIPSIS_RE.sub(HELLIP, text)
    text = text.replace('...', HELLIP)
    return re.sub(r"(?<=\w)'(?=\w)", RSQUO, text)


def reverse_quotes(text: str) -> str:
    for smart, plain in ((LDQUO, '"'), (RDQUO, '"'), (LSQUO, "'"),
                         (RSQUO, "'"), (LAQUO, '<<'), (RAQUO, '>>')):
        text = text.replace(smart, plain)
    return text


def reverse_punctuation(text: str) -> str:
    text = text.replace(MDASH, '---').replace(NDASH, '--')
    text = text.replace(HELLIP, '...')
    return re.sub(r'(?<=\w)’(?=\w)', "'", text)
