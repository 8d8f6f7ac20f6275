"""Path finding algorithms."""

from .shortest_path import ShortestPathFinder

__all__ = ["ShortestPathFinder"]
