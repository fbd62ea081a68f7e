import logging
import math
from enum import Enum
from typing import Callable, Tuple, Union

logger = logging.getLogger("NeuroBloom.network")


class Activation(str, Enum):
    RELU = "relu"
    TANH = "tanh"
    SIGMOID = "sigmoid"
    LINEAR = "linear"


class RegularizationType(str, Enum):
    NONE = "none"
    L1 = "l1"
    L2 = "l2"


def relu(x: float) -> float:
    return max(0.0, x)


def relu_deriv(x: float) -> float:
    # Non-differentiable at 0, treated as 0
    return 1.0 if x > 0 else 0.0


def tanh(x: float) -> float:
    return math.tanh(x)


def tanh_deriv(x: float) -> float:
    t = math.tanh(x)
    return 1.0 - t * t


def sigmoid(x: float) -> float:
    # Split on sign so exp() never overflows
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def sigmoid_deriv(x: float) -> float:
    s = sigmoid(x)
    return s * (1.0 - s)


def linear(x: float) -> float:
    return x


def linear_deriv(x: float) -> float:
    return 1.0


_FUNCTIONS = {
    Activation.RELU: (relu, relu_deriv),
    Activation.TANH: (tanh, tanh_deriv),
    Activation.SIGMOID: (sigmoid, sigmoid_deriv),
    Activation.LINEAR: (linear, linear_deriv),
}


def resolve_activation(name: Union[str, Activation]) -> Activation:
    """Map an activation name to the enum, falling back to tanh for unknown names."""
    try:
        return Activation(name)
    except ValueError:
        logger.warning(f"Unknown activation {name!r}, falling back to tanh")
        return Activation.TANH


def resolve_regularization(name: Union[str, RegularizationType]) -> RegularizationType:
    try:
        return RegularizationType(name)
    except ValueError:
        logger.warning(f"Unknown regularization {name!r}, falling back to none")
        return RegularizationType.NONE


def get_activation(name: Union[str, Activation]) -> Tuple[Callable[[float], float], Callable[[float], float]]:
    """Return the (function, derivative) pair for an activation name."""
    return _FUNCTIONS[resolve_activation(name)]
