import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .types import Color, LiveNeuron, Vec3

FADE_RATE = 0.03      # Per-frame pull back toward the original colour
BLEND_RATE = 0.2
ACTIVATION_DECAY = 0.98

CYAN = Color.from_hex("#00E5FF")
PURPLE = Color.from_hex("#9B6AFF")
GREEN = Color.from_hex("#5FE88C")
ORANGE = Color.from_hex("#FFB74A")
PINK = Color.from_hex("#FF6B9D")


class AlgorithmType(str, Enum):
    WAVE_PROPAGATION = "wave-propagation"
    SPIRAL_GROWTH = "spiral-growth"
    CASCADE_ACTIVATION = "cascade-activation"
    PULSE_NETWORK = "pulse-network"
    RANDOM_WALKER = "random-walker"


@dataclass(frozen=True)
class AlgorithmInfo:
    id: AlgorithmType
    name: str
    description: str
    duration: int   # Seconds
    color: str


ALGORITHMS: List[AlgorithmInfo] = [
    AlgorithmInfo(
        AlgorithmType.WAVE_PROPAGATION,
        "Wave Propagation",
        "Activation waves travel radially outward from the centre, like a signal spreading through the brain.",
        5,
        "#4A9EFF",
    ),
    AlgorithmInfo(
        AlgorithmType.SPIRAL_GROWTH,
        "Spiral Growth",
        "Neurons light up along a rotating spiral, an organic growth pattern.",
        6,
        "#9B6AFF",
    ),
    AlgorithmInfo(
        AlgorithmType.CASCADE_ACTIVATION,
        "Cascade Activation",
        "A cascade sweeps diagonally across the network, one neuron after another.",
        4,
        "#5FE88C",
    ),
    AlgorithmInfo(
        AlgorithmType.PULSE_NETWORK,
        "Pulse Network",
        "The whole network pulses in synchronised rhythmic waves, similar to brain waves.",
        8,
        "#FF6B9D",
    ),
    AlgorithmInfo(
        AlgorithmType.RANDOM_WALKER,
        "Random Walker",
        "Activation wanders through the network, simulating spontaneous neural activity.",
        7,
        "#FFB74A",
    ),
]


class ColorMode(str, Enum):
    SET = "set"        # Copy the target colour directly
    BLEND = "blend"    # Move toward the target colour at BLEND_RATE
    FADE = "fade"      # Move back toward the original colour at FADE_RATE


@dataclass(frozen=True)
class NeuronSnapshot:
    id: str
    position: Vec3
    activation: float
    color: Color

    @classmethod
    def of(cls, neuron: LiveNeuron) -> "NeuronSnapshot":
        return cls(neuron.id, neuron.position, neuron.activation, neuron.color.copy())


@dataclass(frozen=True)
class Target:
    activation: float
    color: Optional[Color] = None
    mode: ColorMode = ColorMode.FADE


class Algorithm:
    """A decorative animation: a pure function of elapsed time and a neuron snapshot."""
    type: AlgorithmType

    def plan(self, elapsed: float, snapshot: Sequence[NeuronSnapshot]) -> Any:
        """Per-frame values shared by every neuron. Default: none."""
        return None

    def target(self, elapsed: float, neuron: NeuronSnapshot, plan: Any) -> Target:
        raise NotImplementedError

    def targets(self, elapsed: float, snapshot: Sequence[NeuronSnapshot]) -> List[Target]:
        plan = self.plan(elapsed, snapshot)
        return [self.target(elapsed, neuron, plan) for neuron in snapshot]


class WavePropagation(Algorithm):
    type = AlgorithmType.WAVE_PROPAGATION
    speed = 0.5
    width = 4.0
    band = 0.2

    def target(self, elapsed, neuron, plan):
        radius = elapsed * self.speed
        diff = abs(neuron.position.length() - radius)
        falloff = math.exp(-(diff * diff) / self.width)
        if falloff > self.band:
            return Target(falloff * 0.95, CYAN, ColorMode.SET)
        return Target(falloff * 0.95)


def _three_stop(t: float) -> Color:
    """Cycle purple -> cyan -> green -> purple for t in [0, 1)."""
    stops = (PURPLE, CYAN, GREEN, PURPLE)
    scaled = (t % 1.0) * 3
    i = min(int(scaled), 2)
    return stops[i].lerp(stops[i + 1], scaled - i)


class SpiralGrowth(Algorithm):
    type = AlgorithmType.SPIRAL_GROWTH
    threshold = 0.4

    def target(self, elapsed, neuron, plan):
        x, _, z = neuron.position
        angle = math.atan2(z, x)
        planar = math.sqrt(x * x + z * z)

        phase = angle + planar * 0.3 - elapsed * 0.35
        wave = (math.sin(phase) + 1) / 2
        expansion = (math.sin(elapsed * 0.5 - planar * 0.25) + 1) / 2
        activation = wave * expansion * 0.9

        color = _three_stop((angle + elapsed * 0.35) / (2 * math.pi))
        if activation > self.threshold:
            return Target(activation, color, ColorMode.SET)
        return Target(activation, color, ColorMode.BLEND)


class CascadeActivation(Algorithm):
    type = AlgorithmType.CASCADE_ACTIVATION
    total_duration = 6.0
    bump_duration = 3.0

    def plan(self, elapsed, snapshot):
        # Diagonal sweep order, id breaks ties
        ordered = sorted(snapshot, key=lambda n: (0.5 * n.position.x + 0.5 * n.position.y, n.id))
        count = len(ordered)
        return {n.id: (rank / count) * self.total_duration for rank, n in enumerate(ordered)}

    def target(self, elapsed, neuron, plan):
        local = elapsed - plan[neuron.id]
        if 0 <= local <= self.bump_duration:
            progress = local / self.bump_duration
            return Target(math.sin(progress * math.pi), GREEN.lerp(ORANGE, progress), ColorMode.SET)
        return Target(neuron.activation * ACTIVATION_DECAY)


class PulseNetwork(Algorithm):
    type = AlgorithmType.PULSE_NETWORK
    frequency = 0.25
    color_frequency = 0.08

    def target(self, elapsed, neuron, plan):
        x, y, z = neuron.position
        offset = (x + y + z) * 0.05
        pulse = (math.sin(2 * math.pi * self.frequency * elapsed + offset) + 1) / 2
        shade = (math.sin(2 * math.pi * self.color_frequency * elapsed + offset) + 1) / 2
        color = PINK.lerp(PURPLE, shade)
        if pulse > 0.5:
            return Target(pulse * 0.9, color, ColorMode.SET)
        return Target(pulse * 0.9, color, ColorMode.BLEND)


def walker_index(step: int, neuron_count: int) -> int:
    """Hash-style pseudo-random index, reproducible for a given step."""
    return math.floor(math.sin(step * 12.9898) * 43758.5453) % neuron_count


class RandomWalker(Algorithm):
    type = AlgorithmType.RANDOM_WALKER
    steps_per_second = 0.8
    reach = 4.5

    def plan(self, elapsed, snapshot):
        count = len(snapshot)
        step = math.floor(elapsed * self.steps_per_second)
        if count == 0 or step >= count * 2:
            return None
        return snapshot[walker_index(step, count)]

    def target(self, elapsed, neuron, plan):
        if plan is not None:
            if neuron.id == plan.id:
                return Target(0.95, ORANGE, ColorMode.SET)
            distance = neuron.position.distance_to(plan.position)
            if distance < self.reach:
                boost = (1 - distance / self.reach) ** 2 * 0.7
                return Target(max(neuron.activation, boost), GREEN, ColorMode.SET)
        return Target(neuron.activation * ACTIVATION_DECAY)


REGISTRY: Dict[AlgorithmType, Algorithm] = {
    algorithm.type: algorithm
    for algorithm in (WavePropagation(), SpiralGrowth(), CascadeActivation(), PulseNetwork(), RandomWalker())
}


def apply_targets(
    neurons: Sequence[LiveNeuron],
    targets: Sequence[Target],
    original_colors: Dict[str, Color],
) -> None:
    """Commit computed targets: clamp activation, then set, blend or fade each colour."""
    for neuron, target in zip(neurons, targets):
        neuron.activation = min(1.0, max(0.0, target.activation))
        if target.mode == ColorMode.SET:
            neuron.color = target.color.copy()
        elif target.mode == ColorMode.BLEND:
            neuron.color = neuron.color.lerp(target.color, BLEND_RATE)
        else:
            original = original_colors.get(neuron.id)
            if original is not None:
                neuron.color = neuron.color.lerp(original, FADE_RATE)
