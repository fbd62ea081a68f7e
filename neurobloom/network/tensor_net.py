import torch
import torch.nn as nn

from .activations import Activation, resolve_activation
from .network import Network

_TORCH_ACTIVATIONS = {
    Activation.RELU: torch.relu,
    Activation.TANH: torch.tanh,
    Activation.SIGMOID: torch.sigmoid,
    Activation.LINEAR: lambda t: t,
}


class TensorNet(nn.Module):
    def __init__(self, network: Network):
        """Snapshot a Network's weights and biases into a batched torch module."""
        super().__init__()
        self.activation = resolve_activation(network.activation)
        self.layer_sizes = [len(layer) for layer in network.layers]

        # Flat node ordering: layer by layer, index within layer
        nodes = [node for layer in network.layers for node in layer]
        self.node_index = {node.id: idx for idx, node in enumerate(nodes)}
        self.layer_slices = []
        start = 0
        for size in self.layer_sizes:
            self.layer_slices.append((start, start + size))
            start += size

        # Register weights and biases
        self.weights = nn.Parameter(torch.tensor([l.weight for l in network.links], dtype=torch.float64))
        self.biases = nn.Parameter(torch.tensor([n.bias for n in nodes], dtype=torch.float64))

        # Build edge index tensors
        src = [self.node_index[l.source.id] for l in network.links]
        dst = [self.node_index[l.dest.id] for l in network.links]
        self.register_buffer("src_idx", torch.tensor(src, dtype=torch.long))
        self.register_buffer("dst_idx", torch.tensor(dst, dtype=torch.long))

        # Links grouped by destination layer
        dst_layers = [l.dest.layer for l in network.links]
        self.link_masks = [
            torch.tensor([d == i for d in dst_layers], dtype=torch.bool)
            for i in range(len(self.layer_sizes))
        ]

    def node_values(self, x: torch.Tensor) -> torch.Tensor:
        """Post-activation value of every node, shape (batch, num_nodes)."""
        x = x.to(torch.float64)
        batch_size = x.size(0)
        act = _TORCH_ACTIVATIONS[self.activation]

        columns = [x]

        for i in range(1, len(self.layer_sizes)):
            values = torch.cat(columns, dim=1)
            mask = self.link_masks[i]
            contrib = values[:, self.src_idx[mask]] * self.weights[mask]

            start, end = self.layer_slices[i]
            total = torch.zeros(batch_size, end - start, dtype=torch.float64, device=x.device)
            total = total.index_add(1, self.dst_idx[mask] - start, contrib)
            total = total + self.biases[start:end]
            columns.append(act(total))

        return torch.cat(columns, dim=1)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        start, end = self.layer_slices[-1]
        return self.node_values(x)[:, start:end]
