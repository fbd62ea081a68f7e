import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple


class Vec3(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_to(self, other: "Vec3") -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)


@dataclass
class Color:
    """RGB colour with float channels in [0, 1]."""
    r: float
    g: float
    b: float

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        value = value.lstrip("#")
        return cls(*(int(value[i:i + 2], 16) / 255 for i in (0, 2, 4)))

    def copy(self) -> "Color":
        return Color(self.r, self.g, self.b)

    def set(self, other: "Color") -> None:
        self.r, self.g, self.b = other.r, other.g, other.b

    def lerp(self, target: "Color", alpha: float) -> "Color":
        """Return a new colour moved ``alpha`` of the way toward ``target``."""
        return Color(
            self.r + (target.r - self.r) * alpha,
            self.g + (target.g - self.g) * alpha,
            self.b + (target.b - self.b) * alpha,
        )

    def to_hex(self) -> str:
        channels = (max(0, min(255, round(c * 255))) for c in (self.r, self.g, self.b))
        return "#" + "".join(f"{c:02X}" for c in channels)


class NeuronType(str, Enum):
    INPUT = "input"
    HIDDEN = "hidden"
    OUTPUT = "output"


class SimulationMode(str, Enum):
    IDLE = "idle"
    TRAINING = "training"
    INFERENCE = "inference"
    DEGRADING = "degrading"


@dataclass
class LiveConnection:
    id: str
    from_id: str
    to_id: str
    weight: float
    strength: float = 0.5       # Rendering opacity, |weight| once trained
    age: int = 0
    last_activation: float = 0.0


@dataclass
class LiveNeuron:
    id: str
    position: Vec3
    type: NeuronType
    color: Color
    activation: float = 0.0
    age: int = 0
    health: float = 1.0
    training_count: int = 0
    learning_rate: float = 0.1
    connections: List[LiveConnection] = field(default_factory=list)  # Incoming only


@dataclass
class NetworkStats:
    total_neurons: int = 0
    total_connections: int = 0
    average_activation: float = 0.0
    average_health: float = 1.0
    training_epochs: int = 0
    accuracy: float = 0.0
    is_overfitted: bool = False
    is_underfitted: bool = False
