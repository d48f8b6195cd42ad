# errors.py
"""
Exceptions raised by the compact routing scheme construction.
"""


class InvalidConfigurationError(ValueError):
    """Raised when the scheme parameters cannot produce a meaningful core threshold."""
