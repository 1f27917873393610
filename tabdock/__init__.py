"""Docking layout model: surfaces, binary split trees and movable tabs."""

__version__ = "0.1.0"

__all__ = [
    "dock_state",
    "geometry",
    "indices",
    "node",
    "placement",
    "translations",
    "tree",
    "window_state",
]