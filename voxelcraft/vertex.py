"""Vertex layout used by meshes and by the GPU vertex input description."""

from __future__ import annotations

import struct
from dataclasses import dataclass

# Packed layout with the natural alignment of the fields, padded to 4 bytes.
_LAYOUT = struct.Struct("<3f3B2B3B2f2f2B2x")

VERTEX_STRIDE = _LAYOUT.size


def _float_components(values, count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{name} needs {count} components, got {len(result)}")
    return result


def _byte_components(values, count: int, name: str) -> tuple[int, ...]:
    # Unsigned 8-bit components wrap, so -1 becomes 255.
    result = tuple(int(v) & 0xFF for v in values)
    if len(result) != count:
        raise ValueError(f"{name} needs {count} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """A single mesh vertex."""

    pos: tuple = (0.0, 0.0, 0.0)
    color: tuple = (0, 0, 0)
    tex_pos: tuple = (0, 0)
    normal: tuple = (0, 0, 0)
    tile_start: tuple = (0.0, 0.0)
    tile_size: tuple = (1.0, 1.0)
    repeat_count: tuple = (1, 1)

    def __post_init__(self) -> None:
        set_field = object.__setattr__
        set_field(self, "pos", _float_components(self.pos, 3, "pos"))
        set_field(self, "color", _byte_components(self.color, 3, "color"))
        set_field(self, "tex_pos", _byte_components(self.tex_pos, 2, "tex_pos"))
        set_field(self, "normal", _byte_components(self.normal, 3, "normal"))
        set_field(self, "tile_start", _float_components(self.tile_start, 2, "tile_start"))
        set_field(self, "tile_size", _float_components(self.tile_size, 2, "tile_size"))
        set_field(self, "repeat_count", _byte_components(self.repeat_count, 2, "repeat_count"))

    def pack(self) -> bytes:
        """Return the vertex as bytes in GPU layout."""
        return _LAYOUT.pack(
            *self.pos,
            *self.color,
            *self.tex_pos,
            *self.normal,
            *self.tile_start,
            *self.tile_size,
            *self.repeat_count,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Vertex":
        """Build a vertex from bytes produced by :meth:`pack`."""
        if len(data) != VERTEX_STRIDE:
            raise ValueError(f"vertex data must be {VERTEX_STRIDE} bytes, got {len(data)}")
        values = _LAYOUT.unpack(data)
        return cls(
            pos=values[0:3],
            color=values[3:6],
            tex_pos=values[6:8],
            normal=values[8:11],
            tile_start=values[11:13],
            tile_size=values[13:15],
            repeat_count=values[15:17],
        )


@dataclass(frozen=True)
class VertexAttribute:
    """Description of one vertex attribute in the input binding."""

    location: int
    binding: int
    format: str
    offset: int
    field_name: str


_ATTRIBUTES = (
    ("pos", "R32G32B32_SFLOAT", 0),
    ("color", "R8G8B8_UNORM", 12),
    ("tex_pos", "R8G8_UNORM", 15),
    ("normal", "R8G8B8_UNORM", 17),
    ("tile_start", "R32G32_SFLOAT", 20),
    ("tile_size", "R32G32_SFLOAT", 28),
    ("repeat_count", "R8G8_UNORM", 36),
)


def vertex_binding_description() -> dict:
    """Return the binding description for a per-vertex buffer."""
    return {"binding": 0, "stride": VERTEX_STRIDE, "input_rate": "vertex"}


def vertex_attribute_descriptions() -> list[VertexAttribute]:
    """Return the attribute descriptions, one per vertex field."""
    return [
        VertexAttribute(location=location, binding=0, format=fmt, offset=offset, field_name=name)
        for location, (name, fmt, offset) in enumerate(_ATTRIBUTES)
    ]