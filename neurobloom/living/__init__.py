from .types import Color, LiveConnection, LiveNeuron, NetworkStats, NeuronType, SimulationMode, Vec3
from .lifecycle import (
    TrainingIssues,
    age_step,
    calculate_health,
    create_connection,
    create_neuron,
    detect_training_issues,
    hebbian_error,
    hebbian_step,
    health_tint,
    random_sphere_position,
    update_connection_weight,
)
from .algorithms import ALGORITHMS, Algorithm, AlgorithmType, ColorMode, Target, walker_index
from .runner import AlgorithmRunner
from .graph import LivingGraph, visualize_living_graph

__all__ = [
    "Color",
    "LiveConnection",
    "LiveNeuron",
    "NetworkStats",
    "NeuronType",
    "SimulationMode",
    "Vec3",
    "TrainingIssues",
    "age_step",
    "calculate_health",
    "create_connection",
    "create_neuron",
    "detect_training_issues",
    "hebbian_error",
    "hebbian_step",
    "health_tint",
    "random_sphere_position",
    "update_connection_weight",
    "ALGORITHMS",
    "Algorithm",
    "AlgorithmType",
    "ColorMode",
    "Target",
    "walker_index",
    "AlgorithmRunner",
    "LivingGraph",
    "visualize_living_graph",
]
