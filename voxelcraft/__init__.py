"""Vertex layout, camera, scene and physics components, GPU setup rules and voxel data."""

__version__ = "0.1.0"