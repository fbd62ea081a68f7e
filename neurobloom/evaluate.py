import torch
from typing import Dict, Sequence

from .data import Point, feature_vector
from .network import Network, TensorNet

GRID_EXTENT = 6.0


def _inputs(points: Sequence[Point], features: Sequence[str]) -> torch.Tensor:
    return torch.tensor([feature_vector(p.x, p.y, features) for p in points], dtype=torch.float64)


def predict_batch(network: Network, inputs: torch.Tensor) -> torch.Tensor:
    """Output of node 0 for every row of ``inputs``, without touching the network's state."""
    net = TensorNet(network)
    net.eval()
    with torch.no_grad():
        return net(inputs)[:, 0]


def evaluate_points(network: Network, points: Sequence[Point], features: Sequence[str]) -> Dict[str, float]:
    """Mean squared-error loss (0.5 * err^2) and sign accuracy over ``points``."""
    if not points:
        return {"loss": 0.0, "accuracy": 0.0}

    outputs = predict_batch(network, _inputs(points, features))
    labels = torch.tensor([p.label for p in points], dtype=torch.float64)

    loss = (0.5 * (outputs - labels) ** 2).mean().item()
    ones = torch.ones_like(outputs)
    predicted = torch.where(outputs >= 0, ones, -ones)
    accuracy = (predicted == labels).to(torch.float64).mean().item()
    return {"loss": loss, "accuracy": accuracy}


def _grid_inputs(features: Sequence[str], resolution: int, extent: float) -> torch.Tensor:
    coords = torch.linspace(-extent, extent, resolution, dtype=torch.float64)
    rows = []
    # Row 0 is the top of the plot (y = +extent)
    for cy in reversed(coords.tolist()):
        for cx in coords.tolist():
            rows.append(feature_vector(cx, cy, features))
    return torch.tensor(rows, dtype=torch.float64)


def decision_boundary(
    network: Network,
    features: Sequence[str],
    resolution: int = 50,
    extent: float = GRID_EXTENT,
) -> torch.Tensor:
    """tanh-squashed network output over a (resolution x resolution) grid."""
    outputs = predict_batch(network, _grid_inputs(features, resolution, extent))
    return torch.tanh(outputs).reshape(resolution, resolution)


def neuron_boundary(
    network: Network,
    layer: int,
    index: int,
    features: Sequence[str],
    resolution: int = 20,
    extent: float = GRID_EXTENT,
) -> torch.Tensor:
    """Post-activation output of a single node over the grid."""
    node = network.node(layer, index)
    net = TensorNet(network)
    net.eval()
    with torch.no_grad():
        values = net.node_values(_grid_inputs(features, resolution, extent))
    return values[:, net.node_index[node.id]].reshape(resolution, resolution)
