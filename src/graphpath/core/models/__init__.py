"""Value types of the graph container."""

from .edge import Edge
from .vertex import Vertex

__all__ = ["Edge", "Vertex"]
