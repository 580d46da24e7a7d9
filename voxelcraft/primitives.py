"""Unit cube geometry for meshes and the sky box."""

from __future__ import annotations

from voxelcraft.vertex import Vertex

_FACE_UVS = ((0, 0), (1, 0), (1, 1), (0, 1))
_UNSET = (-1, -1, -1)

# Each face: outward normal and its four corners in texture-coordinate order.
_FACES = (
    ((0, 0, 1), ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    ((0, 0, -1), ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5))),
    ((-1, 0, 0), ((-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5))),
    ((1, 0, 0), ((0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5))),
    ((0, 1, 0), ((-0.5, 0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    ((0, -1, 0), ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5))),
)

_CUBE_INDICES = (
    0, 1, 2, 2, 3, 0,
    4, 7, 6, 6, 5, 4,
    8, 11, 10, 10, 9, 8,
    12, 13, 14, 14, 15, 12,
    16, 19, 18, 18, 17, 16,
    20, 21, 22, 22, 23, 20,
)

_SKYBOX_INDICES = (
    0, 2, 1, 2, 0, 3,
    4, 6, 7, 6, 4, 5,
    8, 10, 11, 10, 8, 9,
    12, 14, 13, 14, 12, 15,
    16, 18, 19, 18, 16, 17,
    20, 22, 21, 22, 20, 23,
)


def _build(with_normals: bool) -> list[Vertex]:
    return [
        Vertex(
            pos=corner,
            color=_UNSET,
            tex_pos=uv,
            normal=normal if with_normals else _UNSET,
        )
        for normal, corners in _FACES
        for corner, uv in zip(corners, _FACE_UVS)
    ]


def cube_vertices() -> list[Vertex]:
    """Return the 24 vertices of a unit cube with face normals."""
    return _build(with_normals=True)


def cube_vertices_no_normals() -> list[Vertex]:
    """Return the 24 vertices of a unit cube with unset normals."""
    return _build(with_normals=False)


def cube_indices() -> list[int]:
    """Return triangle indices of the cube, wound to face outwards."""
    return list(_CUBE_INDICES)


def skybox_indices() -> list[int]:
    """Return triangle indices of the cube, wound to face inwards."""
    return list(_SKYBOX_INDICES)