"""Chunk block storage and the face tables used for meshing."""

from __future__ import annotations

from voxelcraft.voxel.blocks import BlockType

# Neighbour offsets, one per face: +X, -X, +Y, -Y, +Z, -Z.
DIRECTIONS = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)

# Corner positions of each face of a unit block, in the order of DIRECTIONS.
FACE_VERTICES = (
    ((0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5)),
    ((-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5)),
    ((-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5)),
    ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5)),
    ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5)),
    ((0.5, -0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5)),
)


class ChunkData:
    """A 16 x 256 x 16 column of blocks at a position in the world."""

    CHUNK_SIZE = 16
    CHUNK_HEIGHT = 256

    def __init__(self, world_position=(0, 0, 0), fill: BlockType = BlockType.AIR):
        self.world_position = tuple(int(v) for v in world_position)
        self.modified_chunk = True
        self._blocks = bytearray([int(fill)]) * (
            self.CHUNK_SIZE * self.CHUNK_SIZE * self.CHUNK_HEIGHT
        )

    def _in_bounds(self, x: int, y: int, z: int) -> bool:
        return (
            0 <= x < self.CHUNK_SIZE
            and 0 <= y < self.CHUNK_HEIGHT
            and 0 <= z < self.CHUNK_SIZE
        )

    def to_index(self, x: int, y: int, z: int) -> int:
        """Flat storage index of a local block position."""
        return x + self.CHUNK_SIZE * (y + self.CHUNK_HEIGHT * z)

    def get_block(self, x: int, y: int, z: int) -> BlockType:
        """Block at a local position; NOTHING outside the chunk."""
        if not self._in_bounds(x, y, z):
            return BlockType.NOTHING
        return BlockType(self._blocks[self.to_index(x, y, z)])

    def set_block(self, x: int, y: int, z: int, block_type: BlockType) -> None:
        """Place a block and mark the chunk modified; raise IndexError outside it."""
        if not self._in_bounds(x, y, z):
            raise IndexError(f"block position ({x}, {y}, {z}) is outside the chunk")
        self._blocks[self.to_index(x, y, z)] = int(block_type)
        self.modified_chunk = True