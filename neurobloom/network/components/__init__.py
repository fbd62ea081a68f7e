from .node import Node
from .link import Link

__all__ = ["Node", "Link"]
