"""Block kinds and their texture atlas positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class BlockType(IntEnum):
    """Kinds of block a chunk can hold."""

    NOTHING = 0
    AIR = 1
    GRASS_DIRT = 2
    DIRT = 3
    STONE = 4
    WATER = 5
    SAND = 6
    TREE_TRUNK = 7
    TREE_LEAFES_SOLID = 8


@dataclass(frozen=True)
class TextureData:
    """Atlas tile positions for the top, bottom and sides of a block."""

    block_type: BlockType = BlockType.NOTHING
    up: tuple = (0, 0)
    down: tuple = (0, 0)
    side: tuple = (0, 0)


@dataclass
class BlockDataSO:
    """Texture atlas description: tile size and per-block tile positions."""

    texture_size_x: float
    texture_size_y: float
    texture_data_list: dict = field(default_factory=dict)

    def add_texture_data(self, texture_data: TextureData, block_type: BlockType) -> None:
        """Register texture data for a block type; an existing entry is kept."""
        self.texture_data_list.setdefault(block_type, texture_data)