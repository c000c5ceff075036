"""Exception types raised by the builder core."""

from __future__ import annotations


class ElasticDSLError(Exception):
    """Base class for all ElasticDSL errors."""


class ArgumentTypeError(ElasticDSLError, TypeError):
    """A setter received a value that does not expose the required capability.

    Raised before any state of the receiving node is modified.
    """


class ConfigurationError(ElasticDSLError):
    """The library is not configured for the requested operation.

    Raised by ``Request.do_search`` when no client is available.
    """
