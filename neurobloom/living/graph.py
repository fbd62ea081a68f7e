import logging
import random
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import networkx as nx

from .lifecycle import (
    age_step as age_neurons,
    create_connection,
    create_neuron,
    detect_training_issues,
    hebbian_step,
    health_tint,
    random_sphere_position,
)
from .types import LiveConnection, LiveNeuron, NetworkStats, NeuronType, SimulationMode, Vec3
from ..config import Config

logger = logging.getLogger("NeuroBloom.living")


class LivingGraph:
    """Application-side collection of living neurons and their incoming connections."""
    def __init__(self, config: Optional[Config] = None, rng=None):
        self.config = config or Config()
        self.rng = rng or random.Random()
        self.neurons: List[LiveNeuron] = []
        self.mode = SimulationMode.IDLE
        self.training_epochs = 0
        self.accuracy = 0.0
        self.is_overfitted = False
        self.is_underfitted = False

    def get(self, neuron_id: str) -> LiveNeuron:
        for neuron in self.neurons:
            if neuron.id == neuron_id:
                return neuron
        raise KeyError(neuron_id)

    def initialize(self) -> LiveNeuron:
        first = create_neuron(Vec3(0.0, 0.0, 0.0), NeuronType.INPUT)
        self.neurons = [first]
        return first

    def add_neuron(self, type=NeuronType.HIDDEN) -> LiveNeuron:
        """Place a neuron on a growing sphere and wire it to random existing neurons."""
        radius = getattr(self.config, "base_sphere_radius", 3.0) + len(self.neurons) * 0.1
        neuron = create_neuron(random_sphere_position(radius, rng=self.rng), type)
        neuron.learning_rate = getattr(self.config, "neuron_learning_rate", 0.1)

        num_connections = min(getattr(self.config, "max_initial_connections", 3), len(self.neurons))
        for source in self.rng.sample(self.neurons, num_connections):
            neuron.connections.append(create_connection(source.id, neuron.id, rng=self.rng))

        self.neurons.append(neuron)
        logger.debug(f"Added {neuron.type.value} neuron {neuron.id} with {num_connections} connections")
        return neuron

    def remove_neuron(self, neuron_id: str) -> None:
        G = self.to_graph()
        if neuron_id not in G:
            raise KeyError(neuron_id)
        G.remove_node(neuron_id)

        # Drop connections whose endpoints left the graph
        self.neurons = [n for n in self.neurons if n.id in G]
        for neuron in self.neurons:
            neuron.connections = [c for c in neuron.connections if c.from_id in G]

    def connect(self, from_id: str, to_id: str) -> Optional[LiveConnection]:
        self.get(from_id)
        target = self.get(to_id)
        if any(c.from_id == from_id for c in target.connections):
            return None
        conn = create_connection(from_id, to_id, rng=self.rng)
        target.connections.append(conn)
        return conn

    def start_training(self) -> None:
        self.mode = SimulationMode.TRAINING
        logger.info("Living network training started")

    def stop_training(self) -> None:
        self.mode = SimulationMode.IDLE
        logger.info("Living network training stopped")

    def training_step(self) -> None:
        hebbian_step(self.neurons)

        # Simulated accuracy curve shown next to the live network
        previous = self.accuracy
        self.training_epochs += 1
        self.accuracy = min(0.99, previous + 0.001)
        issues = detect_training_issues(self.accuracy, min(0.95, previous), self.training_epochs)
        self.is_overfitted = issues.is_overfitted
        self.is_underfitted = issues.is_underfitted

    def age_step(self) -> None:
        age_neurons(self.neurons)

    def reset(self) -> None:
        self.stop_training()
        self.neurons = []
        self.training_epochs = 0
        self.accuracy = 0.0
        self.is_overfitted = False
        self.is_underfitted = False

    def stats(self) -> NetworkStats:
        stats = NetworkStats(
            training_epochs=self.training_epochs,
            accuracy=self.accuracy,
            is_overfitted=self.is_overfitted,
            is_underfitted=self.is_underfitted,
        )
        if self.neurons:
            count = len(self.neurons)
            stats.total_neurons = count
            stats.total_connections = sum(len(n.connections) for n in self.neurons)
            stats.average_activation = sum(n.activation for n in self.neurons) / count
            stats.average_health = sum(n.health for n in self.neurons) / count
        return stats

    def to_graph(self) -> nx.DiGraph:
        G = nx.DiGraph()
        for neuron in self.neurons:
            G.add_node(neuron.id, neuron=neuron)
        for neuron in self.neurons:
            for conn in neuron.connections:
                if conn.from_id in G:
                    G.add_edge(conn.from_id, neuron.id, connection=conn)
        return G


def visualize_living_graph(graph: LivingGraph, ax=None) -> Dict[str, tuple]:
    """
    Draw the living network projected onto the x/y plane.
    Node colours are health-tinted, edge alpha follows connection strength.
    """
    G = graph.to_graph()
    pos = {n.id: (n.position.x, n.position.y) for n in graph.neurons}

    node_colors = [health_tint(G.nodes[nid]["neuron"]).to_hex() for nid in G.nodes()]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=300, ax=ax)

    for u, v, data in G.edges(data=True):
        nx.draw_networkx_edges(
            G, pos, edgelist=[(u, v)], alpha=max(0.1, min(1.0, data["connection"].strength)), ax=ax
        )

    if ax is None:
        plt.show()
    return pos
