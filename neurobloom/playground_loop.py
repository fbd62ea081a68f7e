import asyncio
import logging
import os
import random
from time import monotonic
from typing import Optional

import pandas as pd

from .config import Config
from .data import TrainingRecord
from .living import AlgorithmRunner, LivingGraph, NeuronType
from .trainer import Trainer

STATS_COLUMNS = ["epoch", "step", "train_loss", "test_loss", "accuracy", "timestamp"]


# -------------------------------
# Logging helpers
# -------------------------------
def setup_logging(log_file: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger("NeuroBloom")
    logger.setLevel(logging.DEBUG)

    fmt = logging.Formatter("[%(asctime)s][%(processName)s][%(levelname)s] %(message)s")

    # Repeated calls must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


class PlaygroundLoop:
    """
    Fixed-period driver for both engines.

    The playground network trains at ``training_fps``, the living network runs a
    Hebbian tick at the same cadence and ages every ``aging_interval`` seconds,
    and the decorative algorithm updates at ``algorithm_fps``.
    """
    def __init__(self, config: Config, rng=None) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.run_seconds = getattr(config, "run_seconds", 10.0)
        self.training_period = 1.0 / getattr(config, "training_fps", 5)
        self.algorithm_period = 1.0 / getattr(config, "algorithm_fps", 60)
        self.aging_period = getattr(config, "aging_interval", 1.0)
        self.stats_path = getattr(config, "stats_path", None)
        self.log_path = getattr(config, "log_path", None)

        self.trainer = Trainer(config, rng=self.rng)
        self.graph = LivingGraph(config, rng=self.rng)
        self.runner = AlgorithmRunner(self.graph.neurons)

    def seed_graph(self) -> None:
        self.graph.initialize()
        for i in range(getattr(self.config, "initial_neurons", 12) - 1):
            self.graph.add_neuron(NeuronType.OUTPUT if i % 5 == 4 else NeuronType.HIDDEN)
        self.runner.update_neurons(self.graph.neurons)

    async def run(self) -> None:
        logger = setup_logging(self.log_path)
        logger.info("Starting playground loop")

        if self.stats_path and not os.path.exists(self.stats_path):
            os.makedirs(os.path.dirname(self.stats_path) or ".", exist_ok=True)
            pd.DataFrame(columns=STATS_COLUMNS).to_csv(self.stats_path, index=False)

        self.seed_graph()
        self.graph.start_training()
        self.runner.start(getattr(self.config, "algorithm", "wave-propagation"))

        start = monotonic()
        next_training = next_aging = next_frame = start
        last_epoch = self.trainer.epoch

        while monotonic() - start < self.run_seconds:
            now = monotonic()

            if now >= next_training:
                record = self.trainer.step()
                self.graph.training_step()
                if record.epoch != last_epoch:
                    last_epoch = record.epoch
                    self.log_stats(record)
                    logger.info(
                        f"Epoch {record.epoch}: train_loss={record.train_loss:.4f}, "
                        f"test_loss={record.test_loss:.4f}, accuracy={record.accuracy:.3f}"
                    )
                next_training += self.training_period

            if now >= next_aging:
                self.graph.age_step()
                next_aging += self.aging_period

            if now >= next_frame:
                self.runner.update()
                next_frame += self.algorithm_period

            await asyncio.sleep(max(0.0, min(next_training, next_aging, next_frame) - monotonic()))

        self.runner.stop()
        self.graph.stop_training()

        stats = self.graph.stats()
        logger.info(
            f"Playground loop complete | steps={self.trainer.step_count} | "
            f"living neurons={stats.total_neurons}, avg health={stats.average_health:.3f}"
        )

    def log_stats(self, record: TrainingRecord) -> None:
        if not self.stats_path:
            return
        df = pd.DataFrame([record.to_row()], columns=STATS_COLUMNS)
        df.to_csv(self.stats_path, mode="a", header=False, index=False)
