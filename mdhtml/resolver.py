"""
Capability resolution.

Maps one logical capability set onto the two engines: a ``RenderFlags``
bitmask for the render engine and a ``ConvertOptions`` object for the
convert engine. Every both-directional capability changes both sides at
once so a render/convert round trip stays consistent.
"""

import logging

from .capabilities import CapabilitySet, ResolvedConfig
from .extensions import RenderFlags
from .options import ConvertOptions, FencedCodeBlocks, Tables

logger = logging.getLogger('mdhtml')

# (capability attribute, render flag, convert option attribute)
_BOTH_DIRECTIONS = (
    ('abbreviations', RenderFlags.ABBREVIATIONS, 'abbreviations'),
    ('hardwraps', RenderFlags.HARDWRAPS, 'hardwraps'),
    ('definition_lists', RenderFlags.DEFINITIONS, 'definition_lists'),
    ('auto_links', RenderFlags.AUTOLINKS, 'autolinks'),
    ('smart_quotes', RenderFlags.QUOTES, 'reverse_smart_quotes'),
    ('smart_punctuation', RenderFlags.SMARTS, 'reverse_smart_punctuation'),
    ('smart', RenderFlags.SMARTYPANTS, 'reverse_all_smarts'),
)


def resolve(capabilities=None, server_url=None):
    """Resolve a capability set into engine settings for both directions.

    Args:
        capabilities: ``CapabilitySet``, flat mapping, or None for baseline
        server_url: Fallback base URI when the set does not name one

    Returns:
        ResolvedConfig
    """
    caps = CapabilitySet.from_mapping(capabilities)
    result = ResolvedConfig()
    if not caps:
        return result

    enable_all = bool(caps.all)
    flags = RenderFlags.NONE
    options = result.convert_options

    for name, flag, option in _BOTH_DIRECTIONS:
        if enable_all or getattr(caps, name):
            setattr(options, option, True)
            flags |= flag

    if enable_all or caps.fenced_code_blocks:
        options.fenced_code_blocks = FencedCodeBlocks.ENABLED_TILDE
        flags |= RenderFlags.FENCED_CODE_BLOCKS

    if caps.remove_html:
        options.tables = Tables.REMOVE
        flags |= RenderFlags.SUPPRESS_ALL_HTML

    if enable_all or caps.tables:
        options.tables = Tables.MULTI_MARKDOWN
        flags |= RenderFlags.TABLES
    elif caps.remove_tables:
        options.tables = Tables.REMOVE

    if caps.customize_convert_engine is not None:
        customized = caps.customize_convert_engine(options)
        if isinstance(customized, ConvertOptions):
            options = customized
        else:
            logger.debug("Discarding convert customizer result: %r", customized)

    if caps.customize_render_engine is not None:
        customized = caps.customize_render_engine(flags)
        if isinstance(customized, int) and not isinstance(customized, bool):
            flags = RenderFlags(customized)
        else:
            logger.debug("Discarding render customizer result: %r", customized)

    result.render_flags = flags
    result.convert_options = options
    result.base_uri = _resolve_base_uri(caps.base_uri, server_url)
    return result


def _resolve_base_uri(base_uri, server_url):
    if base_uri is False:
        return None
    if base_uri:
        return base_uri
    return server_url
