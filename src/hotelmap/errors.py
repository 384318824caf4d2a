"""Exceptions and warnings raised by the clustering service."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes input the engine cannot work with.

    Empty aggregator input, an inconsistent cluster configuration, a negative
    zoom or a non-positive cache capacity all land here. These are programmer
    errors and are never coerced into a default.
    """


class DataQualityWarning(UserWarning):
    """Emitted when a single record carries a value that had to be replaced."""


class DatasetError(RuntimeError):
    """Raised when the hotel dataset cannot be loaded."""
