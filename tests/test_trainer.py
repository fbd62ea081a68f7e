import random

import pytest

from neurobloom.config import Config
from neurobloom.errors import InvalidConfiguration
from neurobloom.network import Network
from neurobloom.trainer import Trainer


class SmallConfig(Config):
    dataset = "gauss"
    num_samples = 60
    train_split = 50
    batch_size = 10
    hidden_layers = [3]
    learning_rate = 0.05


def test_trainer_builds_network_from_features():
    class WideConfig(SmallConfig):
        features = ["x", "y", "xy"]

    trainer = Trainer(WideConfig(), rng=random.Random(0))
    assert [len(layer) for layer in trainer.network.layers] == [3, 3, 1]
    assert len(trainer.train_points) == 30
    assert len(trainer.test_points) == 30


def test_steps_advance_epochs_and_history():
    trainer = Trainer(SmallConfig(), rng=random.Random(0))
    for _ in range(7):
        record = trainer.step()
    # 30 training points in batches of 10: the fourth batch starts epoch 1
    assert trainer.step_count == 7
    assert trainer.epoch == 2
    assert record.step == 7
    assert len(trainer.history) == 7

    frame = trainer.history_frame()
    assert list(frame.columns) == ["epoch", "step", "train_loss", "test_loss", "accuracy", "timestamp"]
    assert frame["step"].tolist() == list(range(1, 8))


def test_training_learns_separable_clusters():
    trainer = Trainer(SmallConfig(), rng=random.Random(3))
    initial = trainer.evaluate()["train_loss"]
    for _ in range(60):
        trainer.step()
    metrics = trainer.evaluate()
    assert metrics["train_loss"] < initial
    assert metrics["accuracy"] >= 0.9


def test_reset_rebuilds_network():
    trainer = Trainer(SmallConfig(), rng=random.Random(0))
    trainer.step()
    old = trainer.network
    trainer.reset()
    assert trainer.network is not old
    assert trainer.history == []
    assert trainer.epoch == 0 and trainer.step_count == 0


def test_rejects_mismatched_network():
    with pytest.raises(InvalidConfiguration):
        Trainer(SmallConfig(), network=Network([3, 1]))


def test_rejects_bad_batch_size():
    class BadConfig(SmallConfig):
        batch_size = 0

    with pytest.raises(InvalidConfiguration):
        Trainer(BadConfig())
