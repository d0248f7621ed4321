"""Errors raised while building a fuzzy inference system."""


class FuzzyConfigurationError(ValueError):
    """A fuzzy variable, rule or inference setting is malformed."""
