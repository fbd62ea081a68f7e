from .config import Config
from .errors import (
    DimensionMismatch,
    InvalidConfiguration,
    NeuroBloomError,
    StaleStateError,
    UnknownAlgorithmError,
)
from .network import Network, TensorNet
from .data import Point, generate_data
from .trainer import Trainer
from .living import AlgorithmRunner, LivingGraph
from .playground_loop import PlaygroundLoop, setup_logging

__all__ = [
    "Config",
    "DimensionMismatch",
    "InvalidConfiguration",
    "NeuroBloomError",
    "StaleStateError",
    "UnknownAlgorithmError",
    "Network",
    "TensorNet",
    "Point",
    "generate_data",
    "Trainer",
    "AlgorithmRunner",
    "LivingGraph",
    "PlaygroundLoop",
    "setup_logging",
]
