"""Surface materials and textures."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class Texture:
    """Image data with its dimensions."""

    width: int = 0
    height: int = 0
    data: bytes | None = None


def _zeros() -> np.ndarray:
    return np.zeros(3)


@dataclass
class Material:
    """Phong reflection coefficients with optional textures."""

    ambient: np.ndarray = field(default_factory=_zeros)
    diffuse: np.ndarray = field(default_factory=_zeros)
    specular: np.ndarray = field(default_factory=_zeros)
    gloss: float = 0.0
    diffuse_texture: Texture | None = None
    gloss_texture: Texture | None = None

    def __post_init__(self) -> None:
        self.ambient = np.array(self.ambient, dtype=float)
        self.diffuse = np.array(self.diffuse, dtype=float)
        self.specular = np.array(self.specular, dtype=float)