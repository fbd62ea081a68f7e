import math
import random
import uuid
from dataclasses import dataclass, replace
from typing import Dict, List, NamedTuple, Sequence, Union

from .types import Color, LiveConnection, LiveNeuron, NeuronType, Vec3

AGE_LIMIT = 300               # Ticks until the age term reaches 0 (~5 min at 1 Hz)
TRAINING_LIMIT = 10000
HEBBIAN_DECAY = 0.05

BASE_COLORS = {
    NeuronType.INPUT: "#00D4FF",
    NeuronType.HIDDEN: "#B565FF",
    NeuronType.OUTPUT: "#00FF88",
}
DAMAGE_COLOR = Color.from_hex("#FF0000")


class TrainingIssues(NamedTuple):
    is_overfitted: bool
    is_underfitted: bool


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def create_neuron(position: Vec3, type: Union[str, NeuronType] = NeuronType.HIDDEN) -> LiveNeuron:
    type = NeuronType(type)
    return LiveNeuron(
        id=_new_id("neuron"),
        position=Vec3(*position),
        type=type,
        color=Color.from_hex(BASE_COLORS[type]),
    )


def create_connection(from_id: str, to_id: str, rng=None) -> LiveConnection:
    rng = rng or random
    return LiveConnection(
        id=_new_id("conn"),
        from_id=from_id,
        to_id=to_id,
        weight=rng.uniform(-1.0, 1.0),
    )


def sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def calculate_health(neuron: LiveNeuron) -> float:
    """Health never rises: the averaged decay terms multiply the previous health."""
    age_decay = max(0.0, 1 - neuron.age / AGE_LIMIT)
    overtraining_penalty = max(0.0, 1 - neuron.training_count / TRAINING_LIMIT)
    return min(1.0, (age_decay + overtraining_penalty) / 2 * neuron.health)


def detect_training_issues(training_accuracy: float, validation_accuracy: float, epochs: int) -> TrainingIssues:
    # Both flags can be true at once; callers decide how to present that
    gap = training_accuracy - validation_accuracy
    return TrainingIssues(
        is_overfitted=gap > 0.15 and epochs > 100,
        is_underfitted=training_accuracy < 0.7 and epochs > 50,
    )


def update_connection_weight(connection: LiveConnection, error: float, learning_rate: float) -> float:
    return max(-1.0, min(1.0, connection.weight + error * learning_rate))


def hebbian_error(weight: float, source_activation: float, target_activation: float) -> float:
    """Fire-together term with a decay that keeps weights from saturating."""
    return source_activation * target_activation - HEBBIAN_DECAY * weight * target_activation ** 2


@dataclass
class _NeuronUpdate:
    neuron: LiveNeuron
    activation: float
    weights: List[float]
    health: float


def hebbian_step(neurons: Sequence[LiveNeuron]) -> None:
    """
    One synchronous training tick over every non-input neuron.

    Every neuron reads source activations from the same pre-tick snapshot;
    nothing is written until all new values have been computed.
    """
    snapshot: Dict[str, float] = {n.id: n.activation for n in neurons}

    updates = []
    for neuron in neurons:
        if neuron.type == NeuronType.INPUT:
            continue

        sources = [snapshot.get(c.from_id, 0.0) for c in neuron.connections]
        total = sum(s * c.weight for s, c in zip(sources, neuron.connections))
        activation = sigmoid(total)

        weights = [
            update_connection_weight(c, hebbian_error(c.weight, s, activation), neuron.learning_rate)
            for s, c in zip(sources, neuron.connections)
        ]

        trained = replace(neuron, training_count=neuron.training_count + 1)
        updates.append(_NeuronUpdate(neuron, activation, weights, calculate_health(trained)))

    for update in updates:
        neuron = update.neuron
        neuron.activation = update.activation
        neuron.training_count += 1
        neuron.health = update.health
        for conn, weight in zip(neuron.connections, update.weights):
            conn.weight = weight
            conn.strength = abs(weight)
            conn.last_activation = update.activation


def age_step(neurons: Sequence[LiveNeuron]) -> None:
    """Age every neuron and its incoming connections by one tick."""
    healths = []
    for neuron in neurons:
        aged = replace(neuron, age=neuron.age + 1)
        healths.append(calculate_health(aged))

    for neuron, health in zip(neurons, healths):
        neuron.age += 1
        neuron.health = health
        for conn in neuron.connections:
            conn.age += 1


def random_sphere_position(radius: float, rng=None) -> Vec3:
    rng = rng or random
    theta = rng.random() * math.pi * 2
    phi = math.acos(2 * rng.random() - 1)
    return Vec3(
        radius * math.sin(phi) * math.cos(theta),
        radius * math.cos(phi),
        radius * math.sin(phi) * math.sin(theta),
    )


def health_tint(neuron: LiveNeuron) -> Color:
    """Neuron colour pushed toward red as health drops."""
    return neuron.color.lerp(DAMAGE_COLOR, 1 - neuron.health)
