"""Entity components: transforms, meshes, box colliders and rigid bodies."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

GRAVITY = np.array([0.0, -9.81, 0.0])


def _vec3(values) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {array.shape}")
    return array


def _zeros() -> np.ndarray:
    return np.zeros(3)


def _ones() -> np.ndarray:
    return np.ones(3)


def quaternion_from_euler_degrees(angles) -> np.ndarray:
    """Quaternion (w, x, y, z) from rotations about X, Y and Z in degrees."""
    half = np.radians(_vec3(angles)) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def rotate_vector(quaternion, vector) -> np.ndarray:
    """Rotate a 3D vector by a unit quaternion given as (w, x, y, z)."""
    q = np.asarray(quaternion, dtype=float)
    if q.shape != (4,):
        raise ValueError(f"quaternion needs 4 components, got shape {q.shape}")
    w, axis = q[0], q[1:]
    v = _vec3(vector)
    uv = np.cross(axis, v)
    uuv = np.cross(axis, uv)
    return v + 2.0 * (uv * w + uuv)


def _box_corners(low: np.ndarray, high: np.ndarray) -> list[np.ndarray]:
    return [
        np.array([x, y, z])
        for z in (low[2], high[2])
        for y in (low[1], high[1])
        for x in (low[0], high[0])
    ]


@dataclass(eq=False)
class TransformComponent:
    """Position, Euler rotation in degrees and scale of an entity."""

    position: np.ndarray = field(default_factory=_zeros)
    rotation_zyx: np.ndarray = field(default_factory=_zeros)
    scale: np.ndarray = field(default_factory=_ones)
    just_updated: bool = True

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation_zyx = _vec3(self.rotation_zyx)
        self.scale = _vec3(self.scale)


@dataclass
class MeshComponent:
    """Meshes attached to an entity, optionally loaded from model files."""

    hide: bool = False
    meshes: list = field(default_factory=list)
    loaded_from_file: bool = False
    obj_path: str = ""
    mtl_path: str = ""


@dataclass(eq=False)
class BoxColliderComponent:
    """Oriented box collider with a cached world-space bounding box."""

    just_updated: bool = True
    local_min: np.ndarray = field(default_factory=lambda: np.full(3, -0.5))
    local_max: np.ndarray = field(default_factory=lambda: np.full(3, 0.5))
    world_min: np.ndarray = field(default_factory=_zeros)
    world_max: np.ndarray = field(default_factory=_zeros)
    auto_update: bool = False
    position: np.ndarray = field(default_factory=_zeros)
    rotation_zyx: np.ndarray = field(default_factory=_zeros)
    scale: np.ndarray = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        self.local_min = _vec3(self.local_min)
        self.local_max = _vec3(self.local_max)
        self.world_min = _vec3(self.world_min)
        self.world_max = _vec3(self.world_max)
        self.position = _vec3(self.position)
        self.rotation_zyx = _vec3(self.rotation_zyx)
        self.scale = _vec3(self.scale)

    def update_world_aabb(self, position, rotation_zyx, scale) -> None:
        """Store the transform and recompute the world axis-aligned bounds."""
        self.position = _vec3(position)
        self.rotation_zyx = _vec3(rotation_zyx)
        self.scale = _vec3(scale)
        self.just_updated = True
        corners = np.stack(self.world_corners(self.position, self.rotation_zyx, self.scale))
        self.world_min = corners.min(axis=0)
        self.world_max = corners.max(axis=0)

    def world_corners(self, position, rotation_zyx, scale) -> list[np.ndarray]:
        """Return the eight box corners transformed into world space."""
        rotation = quaternion_from_euler_degrees(rotation_zyx)
        scale = _vec3(scale)
        offset = _vec3(position)
        return [
            rotate_vector(rotation, corner) + offset
            for corner in _box_corners(self.local_min * scale, self.local_max * scale)
        ]

    def world_axes(self, rotation_zyx) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return the box's local X, Y and Z axes in world space."""
        rotation = quaternion_from_euler_degrees(rotation_zyx)
        return (
            rotate_vector(rotation, (1.0, 0.0, 0.0)),
            rotate_vector(rotation, (0.0, 1.0, 0.0)),
            rotate_vector(rotation, (0.0, 0.0, 1.0)),
        )

    def contains_point(self, point) -> bool:
        """True if the point lies within the world bounds, edges included."""
        p = _vec3(point)
        return bool(np.all(p >= self.world_min) and np.all(p <= self.world_max))


@dataclass(eq=False)
class RigidBodyComponent:
    """Point-mass dynamics with optional gravity."""

    velocity: np.ndarray = field(default_factory=_zeros)
    acceleration: np.ndarray = field(default_factory=_zeros)
    mass: float = 1.0
    use_gravity: bool = True
    is_static: bool = False

    def __post_init__(self) -> None:
        self.velocity = _vec3(self.velocity)
        self.acceleration = _vec3(self.acceleration)

    def apply_force(self, force) -> None:
        """Accumulate acceleration from a force; ignored for static or massless bodies."""
        if self.is_static or self.mass <= 0.0:
            return
        self.acceleration = self.acceleration + _vec3(force) / self.mass

    def integrate(self, delta_time: float) -> None:
        """Advance the velocity by the accumulated acceleration and reset it."""
        if self.is_static:
            return
        if self.use_gravity:
            self.acceleration = self.acceleration + GRAVITY
        self.velocity = self.velocity + self.acceleration * delta_time
        self.acceleration = np.zeros(3)

    def apply_velocity(self, transform: TransformComponent, delta_time: float) -> None:
        """Move the transform by the current velocity."""
        if self.is_static:
            return
        transform.position = transform.position + self.velocity * delta_time
        transform.just_updated = True