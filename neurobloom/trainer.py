import logging
import random
from typing import Dict, List, Optional

import pandas as pd

from .config import Config
from .data import Point, TrainingRecord, feature_vector, generate_data, split_data, validate_features
from .errors import InvalidConfiguration
from .evaluate import evaluate_points
from .network import Network

logger = logging.getLogger("NeuroBloom.trainer")


class Trainer:
    """Drives the playground network over a generated dataset, one mini-batch per step."""
    def __init__(self, config: Config, network: Optional[Network] = None, rng=None):
        self.config = config
        self.rng = rng or random.Random()
        self.features = validate_features(getattr(config, "features", ["x", "y"]))
        self.batch_size = getattr(config, "batch_size", 16)
        if self.batch_size <= 0:
            raise InvalidConfiguration(f"batch_size must be > 0, got {self.batch_size}")

        if network is not None and network.input_size != len(self.features):
            raise InvalidConfiguration(
                f"Network expects {network.input_size} inputs but {len(self.features)} features are active"
            )
        self.network = network or self._build_network()

        self.history: List[TrainingRecord] = []
        self.epoch = 0
        self.step_count = 0
        self.regenerate()

    def _build_network(self) -> Network:
        layer_sizes = [len(self.features), *getattr(self.config, "hidden_layers", []), 1]
        return Network(
            layer_sizes,
            learning_rate=getattr(self.config, "learning_rate", 0.03),
            activation=getattr(self.config, "activation", "tanh"),
            regularization=getattr(self.config, "regularization", "none"),
            regularization_rate=getattr(self.config, "regularization_rate", 0.0),
            rng=self.rng,
        )

    def regenerate(self) -> None:
        """Draw a fresh dataset and train/test split from the current config."""
        points = generate_data(
            getattr(self.config, "dataset", "circle"),
            getattr(self.config, "num_samples", 200),
            getattr(self.config, "noise", 0),
            rng=self.rng,
        )
        self.train_points, self.test_points = split_data(
            points, getattr(self.config, "train_split", 50), rng=self.rng
        )
        self._order: List[Point] = []
        self._cursor = 0
        logger.info(
            f"Dataset ready: {len(self.train_points)} train / {len(self.test_points)} test points"
        )

    def reset(self) -> None:
        self.network = self._build_network()
        self.history = []
        self.epoch = 0
        self.step_count = 0
        self._order = []
        self._cursor = 0

    def _next_batch(self) -> List[Point]:
        batch = []
        while len(batch) < self.batch_size and self.train_points:
            if self._cursor >= len(self._order):
                if self._order:
                    self.epoch += 1
                self._order = list(self.train_points)
                self.rng.shuffle(self._order)
                self._cursor = 0
            batch.append(self._order[self._cursor])
            self._cursor += 1
        return batch

    def train_batch(self, points: List[Point]) -> float:
        """Online updates, one forward/backward pair per point. Returns the batch loss."""
        total = 0.0
        for p in points:
            output = self.network.forward(feature_vector(p.x, p.y, self.features))
            self.network.backward(p.label)
            total += 0.5 * (output - p.label) ** 2
        return total / len(points) if points else 0.0

    def step(self) -> TrainingRecord:
        self.train_batch(self._next_batch())
        self.step_count += 1

        metrics = self.evaluate()
        record = TrainingRecord(
            epoch=self.epoch,
            step=self.step_count,
            train_loss=metrics["train_loss"],
            test_loss=metrics["test_loss"],
            accuracy=metrics["accuracy"],
        )
        self.history.append(record)
        logger.debug(
            f"Step {self.step_count} (epoch {self.epoch}): "
            f"train_loss={record.train_loss:.4f}, test_loss={record.test_loss:.4f}, accuracy={record.accuracy:.3f}"
        )
        return record

    def evaluate(self) -> Dict[str, float]:
        train = evaluate_points(self.network, self.train_points, self.features)
        test = evaluate_points(self.network, self.test_points, self.features)
        return {
            "train_loss": train["loss"],
            "test_loss": test["loss"],
            "accuracy": test["accuracy"] if self.test_points else train["accuracy"],
        }

    def history_frame(self) -> pd.DataFrame:
        columns = ["epoch", "step", "train_loss", "test_loss", "accuracy", "timestamp"]
        return pd.DataFrame([r.to_row() for r in self.history], columns=columns)
