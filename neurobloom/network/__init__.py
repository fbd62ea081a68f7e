from .activations import Activation, RegularizationType, get_activation, resolve_activation
from .components import Link, Node
from .network import Network, visualize_network
from .tensor_net import TensorNet

__all__ = [
    "Activation",
    "RegularizationType",
    "get_activation",
    "resolve_activation",
    "Link",
    "Node",
    "Network",
    "visualize_network",
    "TensorNet",
]
