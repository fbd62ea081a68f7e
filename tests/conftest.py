import random

import matplotlib
import pytest

matplotlib.use("Agg")

from neurobloom.living import Vec3, create_neuron


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def neuron_grid():
    """A small 3D grid of hidden neurons spread around the origin."""
    neurons = []
    for x in (-4.0, -1.5, 1.5, 4.0):
        for y in (-3.0, 0.0, 3.0):
            for z in (-2.0, 2.0):
                neurons.append(create_neuron(Vec3(x, y, z), "hidden"))
    return neurons
