"""Definitions of specific exceptions raised elsewhere."""


class ConfigurationError(ValueError):
    """Exception for invalid sampling configuration.

    Raised as soon as an invalid value is set, so a run never starts with a
    bad configuration. Values are never clamped.
    """


class NotSampledError(RuntimeError, AttributeError):
    """Exception if sampled values are requested before any were recorded.

    This class inherits from both RuntimeError and AttributeError to help with
    exception handling of property access.
    """
