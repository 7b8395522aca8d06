"""
Custom exception classes for mdhtml.
"""


class MarkdownError(Exception):
    """Base exception for all mdhtml errors."""
    pass


class ConfigurationError(MarkdownError):
    """Error while building a conversion engine from its settings."""
    pass


class ConversionError(MarkdownError):
    """Error raised by an engine while converting a document."""
    pass
