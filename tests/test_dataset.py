import math
import random

import pytest

from neurobloom.data import feature_vector, generate_data, resolve_dataset_type, split_data, validate_features
from neurobloom.errors import InvalidConfiguration


def test_circle_labels_without_noise(rng):
    points = generate_data("circle", 500, 0, rng=rng)
    assert len(points) == 500
    for p in points:
        expected = 1 if math.sqrt(p.x ** 2 + p.y ** 2) < 2.5 else -1
        assert p.label == expected
        assert -5 <= p.x <= 5 and -5 <= p.y <= 5


def test_xor_labels_without_noise(rng):
    for p in generate_data("xor", 300, 0, rng=rng):
        same_sign = (p.x > 0 and p.y > 0) or (p.x < 0 and p.y < 0)
        assert p.label == (1 if same_sign else -1)


def test_gauss_clusters(rng):
    points = generate_data("gauss", 400, 0, rng=rng)
    for p in points:
        centre = 2 if p.label == 1 else -2
        assert abs(p.x - centre) <= 1 and abs(p.y - centre) <= 1
    labels = {p.label for p in points}
    assert labels == {1, -1}


def test_spiral_two_arms(rng):
    points = generate_data("spiral", 400, 0, rng=rng)
    for p in points:
        r = math.hypot(p.x, p.y)
        assert r <= 5 + 1e-9
        expected_angle = (r / 5) * 2 * math.pi + (0 if p.label == 1 else math.pi)
        assert math.cos(expected_angle) * r == pytest.approx(p.x, abs=1e-9)
        assert math.sin(expected_angle) * r == pytest.approx(p.y, abs=1e-9)
    assert {p.label for p in points} == {1, -1}


def test_noise_jitters_points():
    clean = generate_data("circle", 50, 0, rng=random.Random(9))
    noisy = generate_data("circle", 50, 30, rng=random.Random(9))
    diffs = [abs(a.x - b.x) for a, b in zip(clean, noisy)]
    assert max(diffs) > 0
    assert max(diffs) <= 1.5


def test_aliases_and_unknown_types():
    assert resolve_dataset_type("circles") == "circle"
    assert resolve_dataset_type("clusters") == "gauss"
    assert resolve_dataset_type("moons") == "circle"
    points = generate_data("moons", 20, 0, rng=random.Random(1))
    assert all(p.label in (1, -1) for p in points)


def test_invalid_generator_arguments():
    with pytest.raises(InvalidConfiguration):
        generate_data("circle", -1, 0)
    with pytest.raises(InvalidConfiguration):
        generate_data("circle", 10, -5)


def test_points_are_immutable(rng):
    point = generate_data("xor", 1, 0, rng=rng)[0]
    with pytest.raises(Exception):
        point.label = 0


def test_features():
    assert feature_vector(2.0, 3.0, ["x", "y", "x_squared", "y_squared", "xy"]) == [2.0, 3.0, 4.0, 9.0, 6.0]
    assert feature_vector(0.0, math.pi / 2, ["sin_x", "sin_y"]) == pytest.approx([0.0, 1.0])
    with pytest.raises(InvalidConfiguration):
        validate_features(["x", "cos_x"])
    with pytest.raises(InvalidConfiguration):
        validate_features([])


def test_split_data(rng):
    points = generate_data("xor", 100, 0, rng=rng)
    train, test = split_data(points, 70, rng=rng)
    assert len(train) == 70 and len(test) == 30
    assert sorted(map(id, train + test)) == sorted(map(id, points))
    with pytest.raises(InvalidConfiguration):
        split_data(points, 0)
