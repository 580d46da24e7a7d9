"""Collection of debug line geometry."""

from __future__ import annotations

import sys

import numpy as np

from voxelcraft.vertex import Vertex


class DebugDrawer:
    """Accumulates coloured line segments as vertex pairs."""

    def __init__(self, debug_mode: int = 0):
        self.debug_lines: list[Vertex] = []
        self.debug_mode = debug_mode

    def draw_line(self, start, end, color) -> None:
        """Add a line segment from start to end."""
        self.debug_lines.append(Vertex(pos=tuple(start), color=tuple(color)))
        self.debug_lines.append(Vertex(pos=tuple(end), color=tuple(color)))

    def draw_contact_point(self, point_on_b, normal_on_b, distance, life_time, color) -> None:
        """Draw a contact normal scaled by five times the distance."""
        start = np.asarray(point_on_b, dtype=float)
        end = start + np.asarray(normal_on_b, dtype=float) * distance * 5
        self.draw_line(start, end, color)

    def report_error_warning(self, message: str) -> None:
        """Write a warning to standard error."""
        print(f"Debug Warning: {message}", file=sys.stderr)

    def clear_lines(self) -> None:
        """Drop all collected lines."""
        self.debug_lines.clear()