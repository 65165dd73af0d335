"""
Error types raised by date calculations.

Both families subclass ValueError so callers that already guard
calendar code with ``except ValueError`` keep working.
"""


class ConfigurationError(ValueError):
    """A calculator, handler or working week is set up in an unusable way."""


class InputError(ValueError):
    """A date, tenor or other argument could not be interpreted."""


class OutOfBoundaryError(InputError):
    """A date falls outside the range covered by a holiday calendar."""
