import math

import pytest

from neurobloom.network.activations import Activation, get_activation, resolve_activation


def test_derivative_identities():
    _, sigmoid_deriv = get_activation("sigmoid")
    _, tanh_deriv = get_activation("tanh")
    _, relu_deriv = get_activation("relu")
    _, linear_deriv = get_activation("linear")

    assert sigmoid_deriv(0.0) == pytest.approx(0.25)
    assert tanh_deriv(0.0) == pytest.approx(1.0)
    assert relu_deriv(-2.0) == 0.0
    assert relu_deriv(3.0) == 1.0
    assert relu_deriv(0.0) == 0.0
    assert linear_deriv(-7.0) == 1.0


def test_function_values():
    relu, _ = get_activation(Activation.RELU)
    sigmoid, _ = get_activation(Activation.SIGMOID)
    linear, _ = get_activation(Activation.LINEAR)

    assert relu(-1.5) == 0.0
    assert relu(2.5) == 2.5
    assert sigmoid(0.0) == pytest.approx(0.5)
    assert linear(-3.2) == -3.2


def test_sigmoid_does_not_overflow():
    sigmoid, _ = get_activation("sigmoid")
    assert sigmoid(-1000.0) == pytest.approx(0.0)
    assert sigmoid(1000.0) == pytest.approx(1.0)


def test_unknown_activation_falls_back_to_tanh():
    assert resolve_activation("swish") == Activation.TANH
    fn, deriv = get_activation("swish")
    assert fn(0.7) == pytest.approx(math.tanh(0.7))
    assert deriv(0.7) == pytest.approx(1 - math.tanh(0.7) ** 2)
