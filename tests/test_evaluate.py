import random

import pytest
import torch

from neurobloom.data import Point
from neurobloom.evaluate import decision_boundary, evaluate_points, neuron_boundary, predict_batch
from neurobloom.network import Network


def test_predict_batch_leaves_network_state_alone():
    net = Network([2, 3, 1], rng=random.Random(1))
    net.forward([0.2, 0.4])
    outputs = [n.output for layer in net.layers for n in layer]

    predict_batch(net, torch.tensor([[1.0, 1.0], [-1.0, 2.0]], dtype=torch.float64))
    assert [n.output for layer in net.layers for n in layer] == outputs


def test_evaluate_points_loss_and_accuracy():
    net = Network([2, 1], activation="linear", rng=random.Random(0))
    for link in net.links:
        link.weight = 1.0
    net.layers[1][0].bias = 0.0

    points = [Point(1.0, 1.0, 1), Point(-1.0, -1.0, -1), Point(2.0, 0.0, -1)]
    metrics = evaluate_points(net, points, ["x", "y"])

    # outputs 2, -2, 2 -> errors 1, 1, 3
    assert metrics["loss"] == pytest.approx((0.5 + 0.5 + 4.5) / 3)
    assert metrics["accuracy"] == pytest.approx(2 / 3)


def test_evaluate_points_empty():
    net = Network([2, 1])
    assert evaluate_points(net, [], ["x", "y"]) == {"loss": 0.0, "accuracy": 0.0}


def test_decision_boundary_orientation():
    net = Network([2, 1], activation="linear", rng=random.Random(0))
    net.links[0].weight = 0.0
    net.links[1].weight = 1.0
    net.layers[1][0].bias = 0.0

    grid = decision_boundary(net, ["x", "y"], resolution=5)
    assert grid.shape == (5, 5)
    # Output follows y, row 0 is the top of the plot
    assert grid[0, 0].item() == pytest.approx(torch.tanh(torch.tensor(6.0)).item())
    assert grid[-1, 0].item() == pytest.approx(torch.tanh(torch.tensor(-6.0)).item())
    assert torch.all(grid.abs() <= 1)


def test_neuron_boundary_matches_forward():
    net = Network([2, 3, 1], rng=random.Random(8))
    grid = neuron_boundary(net, 1, 2, ["x", "y"], resolution=3)

    net.forward([-6.0, 6.0])
    assert grid[0, 0].item() == pytest.approx(net.node(1, 2).output)
