"""Device selection rules: queue families, formats, memory types, layout transitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Mapping, Optional, Sequence


class ImageLayout(IntEnum):
    UNDEFINED = 0
    GENERAL = 1
    COLOR_ATTACHMENT_OPTIMAL = 2
    DEPTH_STENCIL_ATTACHMENT_OPTIMAL = 3
    DEPTH_STENCIL_READ_ONLY_OPTIMAL = 4
    SHADER_READ_ONLY_OPTIMAL = 5
    TRANSFER_SRC_OPTIMAL = 6
    TRANSFER_DST_OPTIMAL = 7
    PRESENT_SRC = 1000001002


class Format(IntEnum):
    UNDEFINED = 0
    R8_UNORM = 9
    R8G8B8A8_SRGB = 43
    B8G8R8A8_SRGB = 50
    R32G32B32_SFLOAT = 106
    D32_SFLOAT = 126
    D24_UNORM_S8_UINT = 129
    D32_SFLOAT_S8_UINT = 130


class ImageTiling(IntEnum):
    OPTIMAL = 0
    LINEAR = 1


class Access(IntFlag):
    NONE = 0
    SHADER_READ = 0x20
    COLOR_ATTACHMENT_WRITE = 0x100
    DEPTH_STENCIL_ATTACHMENT_READ = 0x200
    DEPTH_STENCIL_ATTACHMENT_WRITE = 0x400
    TRANSFER_READ = 0x800
    TRANSFER_WRITE = 0x1000


class PipelineStage(IntFlag):
    TOP_OF_PIPE = 0x1
    FRAGMENT_SHADER = 0x80
    EARLY_FRAGMENT_TESTS = 0x100
    COLOR_ATTACHMENT_OUTPUT = 0x400
    TRANSFER = 0x1000


class ImageAspect(IntFlag):
    COLOR = 0x1
    DEPTH = 0x2
    STENCIL = 0x4


@dataclass
class QueueFamilyIndices:
    """Indices of the queue families chosen for each kind of work."""

    graphics_family: Optional[int] = None
    present_family: Optional[int] = None
    compute_family: Optional[int] = None

    def is_complete(self) -> bool:
        return (
            self.graphics_family is not None
            and self.present_family is not None
            and self.compute_family is not None
        )


@dataclass(frozen=True)
class QueueFamily:
    """Capabilities of one queue family."""

    graphics: bool = False
    compute: bool = False
    present: bool = False


@dataclass(frozen=True)
class FormatProperties:
    """Feature bits supported by a format for each tiling."""

    linear_tiling_features: int = 0
    optimal_tiling_features: int = 0
    buffer_features: int = 0


@dataclass(frozen=True)
class MemoryType:
    """One memory type of a physical device."""

    property_flags: int = 0
    heap_index: int = 0


@dataclass(frozen=True)
class LayoutTransition:
    """Barrier settings for an image layout change."""

    src_access_mask: Access
    dst_access_mask: Access
    src_stage: PipelineStage
    dst_stage: PipelineStage
    aspect_mask: ImageAspect


def find_queue_families(families: Sequence[QueueFamily]) -> QueueFamilyIndices:
    """Scan queue families in order, stopping once every role is filled."""
    indices = QueueFamilyIndices()
    for index, family in enumerate(families):
        if family.graphics:
            indices.graphics_family = index
        if family.compute:
            indices.compute_family = index
        if family.present:
            indices.present_family = index
        if indices.is_complete():
            break
    return indices


def has_stencil_component(format: Format) -> bool:
    """True for depth formats that also carry a stencil part."""
    return format in (Format.D32_SFLOAT_S8_UINT, Format.D24_UNORM_S8_UINT)


_L = ImageLayout
_TRANSITIONS = {
    (_L.UNDEFINED, _L.TRANSFER_DST_OPTIMAL): (
        Access.NONE, Access.TRANSFER_WRITE, PipelineStage.TOP_OF_PIPE, PipelineStage.TRANSFER),
    (_L.TRANSFER_DST_OPTIMAL, _L.SHADER_READ_ONLY_OPTIMAL): (
        Access.TRANSFER_WRITE, Access.SHADER_READ, PipelineStage.TRANSFER, PipelineStage.FRAGMENT_SHADER),
    (_L.UNDEFINED, _L.DEPTH_STENCIL_ATTACHMENT_OPTIMAL): (
        Access.NONE,
        Access.DEPTH_STENCIL_ATTACHMENT_READ | Access.DEPTH_STENCIL_ATTACHMENT_WRITE,
        PipelineStage.TOP_OF_PIPE,
        PipelineStage.EARLY_FRAGMENT_TESTS),
    (_L.SHADER_READ_ONLY_OPTIMAL, _L.TRANSFER_DST_OPTIMAL): (
        Access.SHADER_READ, Access.TRANSFER_WRITE, PipelineStage.FRAGMENT_SHADER, PipelineStage.TRANSFER),
    (_L.DEPTH_STENCIL_ATTACHMENT_OPTIMAL, _L.SHADER_READ_ONLY_OPTIMAL): (
        Access.DEPTH_STENCIL_ATTACHMENT_READ | Access.DEPTH_STENCIL_ATTACHMENT_WRITE,
        Access.SHADER_READ,
        PipelineStage.EARLY_FRAGMENT_TESTS,
        PipelineStage.FRAGMENT_SHADER),
    (_L.SHADER_READ_ONLY_OPTIMAL, _L.TRANSFER_SRC_OPTIMAL): (
        Access.SHADER_READ, Access.TRANSFER_READ, PipelineStage.FRAGMENT_SHADER, PipelineStage.TRANSFER),
    (_L.UNDEFINED, _L.COLOR_ATTACHMENT_OPTIMAL): (
        Access.NONE, Access.COLOR_ATTACHMENT_WRITE, PipelineStage.TOP_OF_PIPE,
        PipelineStage.COLOR_ATTACHMENT_OUTPUT),
    (_L.COLOR_ATTACHMENT_OPTIMAL, _L.SHADER_READ_ONLY_OPTIMAL): (
        Access.COLOR_ATTACHMENT_WRITE, Access.SHADER_READ, PipelineStage.COLOR_ATTACHMENT_OUTPUT,
        PipelineStage.FRAGMENT_SHADER),
}


def layout_transition(old_layout: ImageLayout, new_layout: ImageLayout, format: Format) -> LayoutTransition:
    """Return the barrier for a supported layout change; raise ValueError otherwise."""
    if new_layout == ImageLayout.DEPTH_STENCIL_ATTACHMENT_OPTIMAL:
        aspect = ImageAspect.DEPTH
        if has_stencil_component(format):
            aspect |= ImageAspect.STENCIL
    else:
        aspect = ImageAspect.COLOR

    try:
        src_access, dst_access, src_stage, dst_stage = _TRANSITIONS[(old_layout, new_layout)]
    except KeyError:
        raise ValueError(
            f"unsupported layout transition! Old: {int(old_layout)} New: {int(new_layout)}"
        ) from None
    return LayoutTransition(src_access, dst_access, src_stage, dst_stage, aspect)


def image_view_swizzle(format: Format) -> tuple[str, str, str, str]:
    """Component mapping (r, g, b, a) for an image view of the given format."""
    if format == Format.R8_UNORM:
        return ("one", "one", "one", "r")
    return ("identity", "identity", "identity", "identity")


def find_memory_type(type_filter: int, properties: int, memory_types: Sequence[MemoryType]) -> int:
    """Index of the first allowed memory type that has all requested properties."""
    for index, memory_type in enumerate(memory_types):
        if type_filter & (1 << index) and (memory_type.property_flags & properties) == properties:
            return index
    raise RuntimeError("failed to find suitable memory type!")


def find_supported_format(
    candidates: Sequence[Format],
    tiling: ImageTiling,
    features: int,
    format_properties: Mapping[Format, FormatProperties],
) -> Format:
    """First candidate whose features for the given tiling include all requested bits."""
    for candidate in candidates:
        props = format_properties.get(candidate, FormatProperties())
        if tiling == ImageTiling.LINEAR and (props.linear_tiling_features & features) == features:
            return candidate
        if tiling == ImageTiling.OPTIMAL and (props.optimal_tiling_features & features) == features:
            return candidate
    raise RuntimeError("failed to find supported format!")