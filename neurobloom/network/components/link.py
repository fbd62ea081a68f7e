import random

from .node import Node


class Link:
    """Directed weighted edge between nodes of consecutive layers."""
    def __init__(self, source: Node, dest: Node, weight=None, rng=None):
        rng = rng or random
        self.source = source
        self.dest = dest
        self.weight = rng.random() - 0.5 if weight is None else weight

    def __repr__(self):
        return f"Link({self.source.id}->{self.dest.id}, w={self.weight:.2f})"
