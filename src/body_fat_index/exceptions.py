"""Errors raised by the Body Fat Index estimator."""


class BodyFatIndexError(ValueError):
    """Base class for all estimator errors."""


class InvalidConfig(BodyFatIndexError):
    """Bad or unknown unit configuration passed at construction."""


class InvalidInput(BodyFatIndexError):
    """Measurements that cannot be used for the calculation."""


class PreconditionError(BodyFatIndexError, RuntimeError):
    """Category requested before any index was computed."""
