"""
Exceptions raised at the tool's boundaries.

Tree traversal itself never fails; only the front end, configuration
loading and report output raise these.
"""


class CCMetricsError(Exception):
    """Base class for all ccmetrics errors."""


class FrontEndError(CCMetricsError):
    """The front end produced no usable tree or IR module."""


class ReportWriteError(CCMetricsError):
    """A report artifact could not be opened or written."""


class ConfigError(CCMetricsError):
    """A configuration file is missing or malformed."""
