"""Exception hierarchy for the Freesound client."""


class FreesoundError(Exception):
    """Base exception for all Freesound client errors."""


class ConfigError(FreesoundError):
    """Invalid or missing configuration (e.g. no API key available)."""
