"""
Errors Module

Exception hierarchy for gedent. Every error raised by the core derives from
GedentError; I/O failures are left as the built-in OSError family.
"""


class GedentError(Exception):
    """Base class for all gedent errors."""


class GeometryFormatError(GedentError, ValueError):
    """Malformed frame header, atom-count mismatch or premature end of geometry input."""


class IndexOutOfRange(GedentError, IndexError):
    """Split index beyond the atom list of a molecule."""


class TemplateHeaderError(GedentError, ValueError):
    """Template header that cannot be parsed or holds invalid options."""


class RenderError(GedentError):
    """Failure while evaluating a template body."""


class InvalidArgumentError(GedentError, TypeError):
    """Wrong-typed argument handed to a template helper function."""


class ConfigError(GedentError, ValueError):
    """Invalid configuration content or configuration operation."""
