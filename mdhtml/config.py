"""
Configuration for mdhtml.

Holds the process-wide defaults used by the shared engines:
1. The capability block (same keys as a per-call configuration)
2. The server URL used as base URI when the block does not name one

Values are class-level defaults and can be overridden per instance, or
read from a hosting application's settings with ``from_mapping``.
"""


class ConversionConfig:
    """Default configuration values for Markdown/HTML conversion."""

    # === Capabilities ===
    # Flat key/value map, e.g. {'tables': True, 'smart': True}.
    # Empty means baseline engines and no base URI.
    MARKDOWN = {}

    # === Base URI fallback ===
    # Used when MARKDOWN is non-empty and has no 'baseUri' entry
    SERVER_URL = None

    def __init__(self, markdown=None, server_url=None):
        if markdown is not None:
            self.MARKDOWN = markdown
        if server_url is not None:
            self.SERVER_URL = server_url

    @classmethod
    def from_mapping(cls, settings):
        """Read configuration from an application settings mapping.

        Recognized keys: ``markdown`` (capability block) and ``serverURL``
        or ``server_url``. Other keys are ignored.

        Args:
            settings: Mapping of application settings

        Returns:
            ConversionConfig
        """
        settings = settings or {}
        server_url = settings.get('serverURL', settings.get('server_url'))
        return cls(markdown=settings.get('markdown'), server_url=server_url)


# Global default config instance
DEFAULT_CONFIG = ConversionConfig()
