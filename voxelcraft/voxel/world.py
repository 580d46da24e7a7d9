"""World-level voxel data: biomes, queued block edits and chunk lookup helpers."""

from __future__ import annotations

from dataclasses import dataclass

from voxelcraft.voxel.blocks import BlockType
from voxelcraft.voxel.chunk import ChunkData

_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class BlockQueueData:
    """A block edit waiting for its chunk to be generated."""

    block_pos: tuple
    block_type: BlockType


@dataclass(frozen=True)
class Biome:
    """Terrain settings for one kind of landscape."""

    name: str
    surface_block: BlockType
    underwater_surface_block: BlockType
    filler_block: BlockType
    underground_block: BlockType
    temp: float
    humidity: float
    elevation: int
    height_diff: int
    persistance: float
    lacunarity: float


def chunk_hash(position) -> int:
    """64-bit hash of a chunk position combining the shifted coordinates."""
    x, y, z = (int(v) & _MASK64 for v in position)
    return (x ^ ((y << 1) & _MASK64) ^ ((z << 2) & _MASK64)) & _MASK64


def surface_block(chunk: ChunkData, x: int, z: int) -> tuple[int, BlockType]:
    """Height and type of the highest solid block in a column, or (-1, NOTHING)."""
    for y in range(ChunkData.CHUNK_HEIGHT - 1, -1, -1):
        block = chunk.get_block(x, y, z)
        if block not in (BlockType.AIR, BlockType.NOTHING):
            return y, block
    return -1, BlockType.NOTHING