import logging
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from .activations import Activation, RegularizationType, get_activation, resolve_regularization
from .components import Link, Node
from ..errors import DimensionMismatch, InvalidConfiguration, StaleStateError

logger = logging.getLogger("NeuroBloom.network")

NodeId = Tuple[int, int]


class Network:
    """Fully-connected feed-forward network trained by online backpropagation.

    Layers are built once from ``layer_sizes`` and never change shape; only
    weights, biases and the per-node forward/backward state mutate.
    """
    def __init__(
        self,
        layer_sizes: Sequence[int],
        learning_rate: float = 0.03,
        activation: str = Activation.TANH,
        regularization: str = RegularizationType.NONE,
        regularization_rate: float = 0.0,
        rng=None,
    ):
        if len(layer_sizes) < 2:
            raise InvalidConfiguration(f"Need at least 2 layers, got {len(layer_sizes)}")
        for size in layer_sizes:
            if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
                raise InvalidConfiguration(f"Layer sizes must be positive integers, got {list(layer_sizes)}")
        if learning_rate <= 0:
            raise InvalidConfiguration(f"learning_rate must be > 0, got {learning_rate}")
        if regularization_rate < 0:
            raise InvalidConfiguration(f"regularization_rate must be >= 0, got {regularization_rate}")

        self.learning_rate = learning_rate
        self.activation = activation
        self.regularization = regularization
        self.regularization_rate = regularization_rate

        self.layers: List[List[Node]] = []
        self.links: List[Link] = []

        # Adjacency index, shares Link objects so weight updates stay visible
        self.incoming: Dict[NodeId, List[Link]] = {}
        self.outgoing: Dict[NodeId, List[Link]] = {}

        for i, size in enumerate(layer_sizes):
            layer = []
            for j in range(size):
                node = Node(i, j)
                self.incoming[node.id] = []
                self.outgoing[node.id] = []
                if i > 0:
                    for prev_node in self.layers[i - 1]:
                        link = Link(prev_node, node, rng=rng)
                        self.links.append(link)
                        self.incoming[node.id].append(link)
                        self.outgoing[prev_node.id].append(link)
                layer.append(node)
            self.layers.append(layer)

        self._armed = False
        logger.debug(f"Built network {list(layer_sizes)} with {len(self.links)} links")

    @property
    def input_size(self) -> int:
        return len(self.layers[0])

    @property
    def num_nodes(self) -> int:
        return sum(len(layer) for layer in self.layers)

    @property
    def num_links(self) -> int:
        return len(self.links)

    @property
    def outputs(self) -> List[float]:
        return [node.output for node in self.layers[-1]]

    def node(self, layer: int, index: int) -> Node:
        return self.layers[layer][index]

    def forward(self, inputs: Sequence[float]) -> float:
        if len(inputs) != self.input_size:
            raise DimensionMismatch(f"Expected {self.input_size} inputs, got {len(inputs)}")

        fn, _ = get_activation(self.activation)

        # Inputs pass through unmodified
        for node, value in zip(self.layers[0], inputs):
            node.output = float(value)

        for layer in self.layers[1:]:
            for node in layer:
                total = node.bias
                for link in self.incoming[node.id]:
                    total += link.source.output * link.weight
                node.total_input = total
                node.output = fn(total)

        self._armed = True
        return self.layers[-1][0].output

    def backward(self, target: float) -> None:
        if not self._armed:
            raise StaleStateError("backward() requires a preceding forward() call")

        _, deriv = get_activation(self.activation)

        output_layer = self.layers[-1]
        head = output_layer[0]
        head.delta = (head.output - target) * deriv(head.total_input)
        for node in output_layer[1:]:
            node.delta = 0.0

        # Hidden deltas, computed with pre-update weights
        for layer in reversed(self.layers[1:-1]):
            for node in layer:
                error_sum = 0.0
                for link in self.outgoing[node.id]:
                    error_sum += link.dest.delta * link.weight
                node.delta = error_sum * deriv(node.total_input)

        regularization = resolve_regularization(self.regularization)
        for link in self.links:
            gradient = link.source.output * link.dest.delta
            link.weight -= self.learning_rate * (gradient + self._regularization_term(link.weight, regularization))

        for layer in self.layers[1:]:
            for node in layer:
                node.bias -= self.learning_rate * node.delta

        self._armed = False

    def _regularization_term(self, weight: float, regularization: RegularizationType) -> float:
        if regularization == RegularizationType.L1:
            sign = (weight > 0) - (weight < 0)
            return self.regularization_rate * sign
        if regularization == RegularizationType.L2:
            return self.regularization_rate * weight
        return 0.0

    def __repr__(self):
        sizes = [len(layer) for layer in self.layers]
        return f"Network(layers={sizes}, activation={self.activation!r}, lr={self.learning_rate})"


def visualize_network(network: Network, ax=None):
    """
    Draw the layered network as a directed graph.
    Inputs = green, hidden = blue, outputs = red.
    Edge width follows |weight|, positive weights blue and negative orange.
    """
    G = nx.DiGraph()
    last = len(network.layers) - 1

    for layer in network.layers:
        for node in layer:
            if node.layer == 0:
                color = "lightgreen"
            elif node.layer == last:
                color = "salmon"
            else:
                color = "lightblue"
            G.add_node(node.id, color=color)

    for link in network.links:
        G.add_edge(link.source.id, link.dest.id, weight=link.weight)

    # Layout: one column per layer, centred vertically
    pos = {}
    for layer in network.layers:
        offset = (len(layer) - 1) / 2
        for node in layer:
            pos[node.id] = (node.layer, offset - node.index)

    node_colors = [G.nodes[n]["color"] for n in G.nodes()]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=600, ax=ax)

    weights = [data["weight"] for _, _, data in G.edges(data=True)]
    edge_colors = ["tab:blue" if w >= 0 else "tab:orange" for w in weights]
    widths = [0.5 + 2.5 * min(1.0, abs(w)) for w in weights]
    nx.draw_networkx_edges(G, pos, edgelist=list(G.edges()), edge_color=edge_colors, width=widths, ax=ax)

    labels = {node.id: f"{node.output:.2f}" for layer in network.layers for node in layer}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=7, ax=ax)

    if ax is None:
        plt.show()
    return G
