from typing import Tuple


class Node:
    """A neuron in one layer of the playground network."""
    def __init__(self, layer: int, index: int, bias: float = 0.1):
        self.id: Tuple[int, int] = (layer, index)
        self.bias = bias
        self.output = 0.0
        self.total_input = 0.0
        self.delta = 0.0  # Only valid during/after a backward pass

    @property
    def layer(self) -> int:
        return self.id[0]

    @property
    def index(self) -> int:
        return self.id[1]

    def __repr__(self):
        return f"Node(id={self.id}, bias={self.bias:.3f}, output={self.output:.3f})"
