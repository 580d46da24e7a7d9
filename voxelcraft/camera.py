"""Free-flying perspective camera driven by yaw and pitch angles."""

from __future__ import annotations

import math

import numpy as np

YAW = -90.0
PITCH = 0.0
SPEED = 20.0
SENSITIVITY = 0.1
ZOOM = 70.0

PITCH_LIMIT = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 120.0


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix, laid out for column vectors (M @ v)."""
    eye = np.asarray(eye, dtype=float)
    center = np.asarray(center, dtype=float)
    up = np.asarray(up, dtype=float)

    forward = _normalize(center - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)

    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye))
    matrix[1, 3] = -float(np.dot(upward, eye))
    matrix[2, 3] = float(np.dot(forward, eye))
    return matrix


class Camera:
    """Camera with a position and an orientation from Euler angles in degrees."""

    def __init__(self, position=(0.0, 0.0, 0.0), up=(0.0, 1.0, 0.0), yaw=YAW, pitch=PITCH):
        self.position = np.array(position, dtype=float)
        self.world_up = np.array(up, dtype=float)
        self.front = np.array([0.0, 0.0, -1.0])
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self._update_vectors()

    def move(self, offset) -> None:
        """Translate the camera by an offset."""
        self.position = self.position + np.asarray(offset, dtype=float)

    def move_forwards(self, amount: float) -> None:
        """Move along the viewing direction."""
        self.position = self.position + self.front * amount

    def move_right(self, amount: float) -> None:
        """Move along the right vector."""
        self.position = self.position + self.right * amount

    def rotate(self, yaw_offset: float, pitch_offset: float, constrain_pitch: bool = True) -> None:
        """Turn the camera; pitch is held within +-89 degrees unless told otherwise."""
        self.yaw += yaw_offset
        self.pitch += pitch_offset
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self._update_vectors()

    def set_zoom(self, zoom: float) -> None:
        """Set the field of view, clamped to [1, 120] degrees."""
        self.zoom = min(max(float(zoom), MIN_ZOOM), MAX_ZOOM)

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))