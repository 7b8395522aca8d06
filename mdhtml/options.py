"""
Convert engine options.

``ConvertOptions`` is the structured settings object for the HTML to
Markdown direction. Its defaults mirror a render engine with no flags set,
so a baseline pair of engines agrees on what Markdown looks like.
"""

from dataclasses import dataclass
from enum import Enum


class FencedCodeBlocks(Enum):
    """How ``<pre>`` blocks are written back."""
    DISABLED = 'disabled'               # four-space indented block
    ENABLED_TILDE = 'tilde'             # ~~~ fences
    ENABLED_BACKTICK = 'backtick'       # ``` fences


class Tables(Enum):
    """How ``<table>`` elements are written back."""
    REMOVE = 'remove'
    CONVERT_TO_CODE_BLOCK = 'code_block'
    LEAVE_AS_HTML = 'html'
    MULTI_MARKDOWN = 'multi_markdown'   # pipe tables


@dataclass
class ConvertOptions:
    abbreviations: bool = False
    hardwraps: bool = False
    definition_lists: bool = False
    autolinks: bool = False
    reverse_smart_quotes: bool = False
    reverse_smart_punctuation: bool = False
    reverse_all_smarts: bool = False
    fenced_code_blocks: FencedCodeBlocks = FencedCodeBlocks.DISABLED
    tables: Tables = Tables.CONVERT_TO_CODE_BLOCK

    @classmethod
    def baseline(cls):
        """Options matching a render engine without extensions."""
        return cls()

    @property
    def reverses_quotes(self):
        return self.reverse_smart_quotes or self.reverse_all_smarts

    @property
    def reverses_punctuation(self):
        return self.reverse_smart_punctuation or self.reverse_all_smarts
