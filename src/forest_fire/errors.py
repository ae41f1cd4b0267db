"""Exceptions raised by the forest fire simulation."""


class ConfigurationError(ValueError):
    """Raised when simulation parameters are invalid.

    Covers non-positive dimensions, probabilities outside [0, 1],
    malformed or out-of-bounds ignition points and unparsable values
    read from a configuration source.
    """
