"""Error taxonomy — callers branch on type, never on message text."""


class BingoGenError(Exception):
    """Base class for every error raised by bingogen."""


class ConfigurationError(BingoGenError):
    """Missing or invalid configuration (API key, provider, counts). Always fatal."""


class GenerationError(BingoGenError):
    """The remote model gave no usable reply."""
