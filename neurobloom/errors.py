class NeuroBloomError(Exception):
    """Base class for engine errors."""


class InvalidConfiguration(NeuroBloomError, ValueError):
    """Raised when a network, dataset or trainer is configured with bad values."""


class DimensionMismatch(NeuroBloomError, ValueError):
    """Raised when an input vector does not match the input layer width."""


class StaleStateError(NeuroBloomError, RuntimeError):
    """Raised when backward() runs without a preceding forward()."""


class UnknownAlgorithmError(NeuroBloomError, ValueError):
    """Raised when an animation algorithm id is not recognised."""
