"""
Capability sets and the engine settings resolved from them.

A capability set is the single logical description of which Markdown
features are wanted. It is resolved into a ``ResolvedConfig`` holding the
render-engine flags and the convert-engine options (see ``resolver.py``).
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Callable, Mapping, Optional, Union

from .extensions import RenderFlags
from .options import ConvertOptions

logger = logging.getLogger('mdhtml')

RenderCustomizer = Callable[[RenderFlags], RenderFlags]
ConvertCustomizer = Callable[[ConvertOptions], ConvertOptions]

# Keys of the flat key/value configuration map
_MAPPING_KEYS = {
    'all': 'all',
    'abbreviations': 'abbreviations',
    'hardwraps': 'hardwraps',
    'definitionLists': 'definition_lists',
    'autoLinks': 'auto_links',
    'smartQuotes': 'smart_quotes',
    'smartPunctuation': 'smart_punctuation',
    'smart': 'smart',
    'fencedCodeBlocks': 'fenced_code_blocks',
    'removeHtml': 'remove_html',
    'tables': 'tables',
    'removeTables': 'remove_tables',
    'baseUri': 'base_uri',
    'customizeRenderEngine': 'customize_render_engine',
    'customizeConvertEngine': 'customize_convert_engine',
}

_CUSTOMIZERS = ('customize_render_engine', 'customize_convert_engine')


@dataclass
class CapabilitySet:
    """Desired Markdown features. ``None`` means "not given"."""

    all: Optional[bool] = None
    abbreviations: Optional[bool] = None
    hardwraps: Optional[bool] = None
    definition_lists: Optional[bool] = None
    auto_links: Optional[bool] = None
    smart_quotes: Optional[bool] = None
    smart_punctuation: Optional[bool] = None
    smart: Optional[bool] = None
    fenced_code_blocks: Optional[bool] = None
    remove_html: Optional[bool] = None
    tables: Optional[bool] = None
    remove_tables: Optional[bool] = None
    base_uri: Union[str, bool, None] = None
    customize_render_engine: Optional[RenderCustomizer] = None
    customize_convert_engine: Optional[ConvertCustomizer] = None

    def __bool__(self):
        return any(getattr(self, f.name) is not None for f in fields(self))

    @classmethod
    def from_mapping(cls, mapping):
        """Build a capability set from a flat key/value map.

        Accepts the camelCase keys used in application configuration as
        well as the attribute names of this class. Unknown keys and
        non-callable customizers are ignored.

        Args:
            mapping: A ``Mapping``, an existing ``CapabilitySet`` or None

        Returns:
            CapabilitySet
        """
        if mapping is None:
            return cls()
        if isinstance(mapping, CapabilitySet):
            return mapping
        if not isinstance(mapping, Mapping):
            raise TypeError(
                f"Capability configuration must be a mapping, got {type(mapping).__name__}"
            )

        attr_names = set(_MAPPING_KEYS.values())
        values = {}
        for key, value in mapping.items():
            name = _MAPPING_KEYS.get(key, key if key in attr_names else None)
            if name is None:
                logger.debug("Ignoring unknown capability key: %s", key)
                continue
            if value is None:
                continue

            if name in _CUSTOMIZERS:
                if not callable(value):
                    logger.debug("Ignoring non-callable %s: %r", key, value)
                    continue
                values[name] = value
            elif name == 'base_uri':
                # only an explicit False disables the base URI
                if value is False or isinstance(value, str):
                    values[name] = value
                else:
                    logger.debug("Ignoring non-string %s: %r", key, value)
            else:
                values[name] = bool(value)

        return cls(**values)


@dataclass
class ResolvedConfig:
    """Engine settings for both directions, derived from a capability set."""

    render_flags: RenderFlags = RenderFlags.NONE
    convert_options: ConvertOptions = field(default_factory=ConvertOptions.baseline)
    base_uri: Optional[str] = None
