"""Exceptions raised while gathering host facts."""


class ValidatorError(Exception):
    """Base class for cgvalidate errors."""


class ParseError(ValidatorError, ValueError):
    """Host data did not have the expected shape."""


class FatalFetchError(ValidatorError):
    """Version info could not be fetched; no report can be produced."""


class RuntimeInfoError(ValidatorError):
    """Container runtime info is missing or invalid."""


class MachineInfoError(ValidatorError):
    """Machine info (block devices, schedulers) is unavailable."""
