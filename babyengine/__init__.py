"""Core of a small 3D engine: transforms, cameras, lights, curves, meshes, scene graphs,
particles, input handling and a demo space scene."""

__version__ = "0.1.0"