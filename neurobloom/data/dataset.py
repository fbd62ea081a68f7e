import logging
import math
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..errors import InvalidConfiguration

logger = logging.getLogger("NeuroBloom.data")

DATASET_TYPES = ("circle", "xor", "gauss", "spiral")
DATASET_ALIASES = {"circles": "circle", "clusters": "gauss"}
DEFAULT_DATASET = "circle"


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    label: int


def resolve_dataset_type(type: str) -> str:
    type = DATASET_ALIASES.get(type, type)
    if type not in DATASET_TYPES:
        logger.warning(f"Unknown dataset type {type!r}, falling back to {DEFAULT_DATASET}")
        return DEFAULT_DATASET
    return type


def generate_data(type: str, count: int, noise: float, rng=None) -> List[Point]:
    """
    Generate ``count`` labelled 2D samples in roughly [-5, 5]^2.
    Labels are +1 / -1. ``noise`` is the playground slider value, 0 disables jitter.
    """
    if count < 0:
        raise InvalidConfiguration(f"count must be >= 0, got {count}")
    if noise < 0:
        raise InvalidConfiguration(f"noise must be >= 0, got {noise}")

    rng = rng or random
    type = resolve_dataset_type(type)

    def rand():
        return (rng.random() - 0.5) * 2  # -1 to 1

    points = []
    for _ in range(count):
        x = rand() * 5
        y = rand() * 5

        if type == "circle":
            label = 1 if math.sqrt(x * x + y * y) < 2.5 else -1
        elif type == "xor":
            label = 1 if (x > 0 and y > 0) or (x < 0 and y < 0) else -1
        elif type == "gauss":
            if rng.random() > 0.5:
                x, y, label = 2 + rand(), 2 + rand(), 1
            else:
                x, y, label = -2 + rand(), -2 + rand(), -1
        else:
            arm = 1 if rng.random() > 0.5 else -1
            r = rng.random() * 5
            t = (r / 5) * 2 * math.pi + (0 if arm == 1 else math.pi)
            x, y, label = r * math.cos(t), r * math.sin(t), arm

        x += (rng.random() - 0.5) * (noise / 10)
        y += (rng.random() - 0.5) * (noise / 10)

        points.append(Point(x, y, label))

    logger.debug(f"Generated {count} {type} points (noise={noise})")
    return points


# Input feature transforms offered by the playground
FEATURES = {
    "x": lambda x, y: x,
    "y": lambda x, y: y,
    "x_squared": lambda x, y: x * x,
    "y_squared": lambda x, y: y * y,
    "xy": lambda x, y: x * y,
    "sin_x": lambda x, y: math.sin(x),
    "sin_y": lambda x, y: math.sin(y),
}


def validate_features(features: Sequence[str]) -> List[str]:
    if not features:
        raise InvalidConfiguration("At least one input feature is required")
    unknown = [f for f in features if f not in FEATURES]
    if unknown:
        raise InvalidConfiguration(f"Unknown features {unknown}, expected any of {list(FEATURES)}")
    return list(features)


def feature_vector(x: float, y: float, features: Sequence[str]) -> List[float]:
    return [FEATURES[f](x, y) for f in features]


def split_data(points: Sequence[Point], train_split: float, rng=None) -> Tuple[List[Point], List[Point]]:
    """Shuffle and split points; ``train_split`` is the training percentage."""
    if not 1 <= train_split <= 99:
        raise InvalidConfiguration(f"train_split must be within [1, 99], got {train_split}")
    rng = rng or random
    shuffled = list(points)
    rng.shuffle(shuffled)
    cut = int(round(len(shuffled) * train_split / 100))
    return shuffled[:cut], shuffled[cut:]
