"""Scene objects: material parameters and transformed game objects."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

import numpy as np

# Each colour is 16-byte aligned; the scalars follow the last colour.
_MATERIAL_LAYOUT = struct.Struct("<3f4x3f4x3f4x3f3f2i")


@dataclass
class MaterialData:
    """Surface material, laid out for use as a push constant block."""

    ambient_color: tuple = (0.1, 0.1, 0.1)
    diffuse_color: tuple = (1.0, 1.0, 1.0)
    specular_color: tuple = (0.5, 0.5, 0.5)
    emission_color: tuple = (0.0, 0.0, 0.0)
    shininess: float = 32.0
    opacity: float = 1.0
    refractive_index: float = 1.45
    illumination_model: int = 2
    has_texture: int = 0

    def pack(self) -> bytes:
        """Return the material in GPU layout."""
        return _MATERIAL_LAYOUT.pack(
            *self.ambient_color,
            *self.diffuse_color,
            *self.specular_color,
            *self.emission_color,
            self.shininess,
            self.opacity,
            self.refractive_index,
            self.illumination_model,
            self.has_texture,
        )


def _translation(offset) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _rotation(axis: int, degrees: float) -> np.ndarray:
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    i, j = [k for k in range(3) if k != axis]
    matrix = np.identity(4)
    matrix[i, i] = c
    matrix[j, j] = c
    # Right-handed rotation; the Y axis has its sine terms swapped.
    if axis == 1:
        matrix[i, j], matrix[j, i] = s, -s
    else:
        matrix[i, j], matrix[j, i] = -s, s
    return matrix


def _scaling(factors) -> np.ndarray:
    return np.diag([*factors, 1.0])


def model_matrix(position, rotation_zyx, scale) -> np.ndarray:
    """Model matrix: translate, rotate about Z, Y then X (degrees), then scale.

    ``rotation_zyx`` holds the Z, Y and X angles in that order.
    """
    z_angle, y_angle, x_angle = (float(a) for a in rotation_zyx)
    return (
        _translation(np.asarray(position, dtype=float))
        @ _rotation(2, z_angle)
        @ _rotation(1, y_angle)
        @ _rotation(0, x_angle)
        @ _scaling(np.asarray(scale, dtype=float))
    )


@dataclass
class GameObject:
    """A placed object in the scene holding a set of meshes."""

    position: tuple = (0.0, 0.0, 0.0)
    rotation_zyx: tuple = (0.0, 0.0, 0.0)
    scale: tuple = (1.0, 1.0, 1.0)
    meshes: list = field(default_factory=list)

    def model_matrix(self) -> np.ndarray:
        """Return the object's model matrix."""
        return model_matrix(self.position, self.rotation_zyx, self.scale)