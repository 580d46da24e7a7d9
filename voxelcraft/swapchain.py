"""Swap chain configuration rules: surface format, present mode, extent, depth format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Sequence

from voxelcraft.device_rules import Format, FormatProperties, ImageTiling, find_supported_format

UINT32_MAX = 0xFFFFFFFF
COLOR_SPACE_SRGB_NONLINEAR = 0
FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT = 0x200

DEPTH_FORMAT_CANDIDATES = (
    Format.D32_SFLOAT,
    Format.D32_SFLOAT_S8_UINT,
    Format.D24_UNORM_S8_UINT,
)


class PresentMode(IntEnum):
    """How finished images are handed to the display."""

    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3


@dataclass(frozen=True)
class SurfaceFormat:
    """A pixel format paired with a colour space."""

    format: Format
    color_space: int = COLOR_SPACE_SRGB_NONLINEAR


@dataclass(frozen=True)
class Extent:
    """Width and height in pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class SurfaceCapabilities:
    """Limits a surface places on its swap chain."""

    min_image_count: int
    max_image_count: int
    current_extent: Extent
    min_image_extent: Extent
    max_image_extent: Extent


def choose_surface_format(available: Sequence[SurfaceFormat]) -> SurfaceFormat:
    """Prefer 8-bit BGRA sRGB in the non-linear sRGB space, else the first offered."""
    if not available:
        raise ValueError("no surface formats available")
    for candidate in available:
        if (
            candidate.format == Format.B8G8R8A8_SRGB
            and candidate.color_space == COLOR_SPACE_SRGB_NONLINEAR
        ):
            return candidate
    return available[0]


def choose_present_mode(available: Sequence[PresentMode]) -> PresentMode:
    """Use immediate presentation when offered, FIFO otherwise."""
    if PresentMode.IMMEDIATE in available:
        return PresentMode.IMMEDIATE
    return PresentMode.FIFO


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def choose_extent(capabilities: SurfaceCapabilities, framebuffer_size) -> Extent:
    """The surface's current extent, or the framebuffer size clamped to the limits."""
    if capabilities.current_extent.width != UINT32_MAX:
        return capabilities.current_extent
    width, height = (int(v) for v in framebuffer_size)
    return Extent(
        _clamp(width, capabilities.min_image_extent.width, capabilities.max_image_extent.width),
        _clamp(height, capabilities.min_image_extent.height, capabilities.max_image_extent.height),
    )


def image_count(capabilities: SurfaceCapabilities) -> int:
    """One more than the minimum, held to the maximum when there is one."""
    count = capabilities.min_image_count + 1
    if capabilities.max_image_count > 0 and count > capabilities.max_image_count:
        count = capabilities.max_image_count
    return count


def depth_format(format_properties: Mapping[Format, FormatProperties]) -> Format:
    """First depth format usable as an optimally tiled depth attachment."""
    return find_supported_format(
        DEPTH_FORMAT_CANDIDATES,
        ImageTiling.OPTIMAL,
        FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT,
        format_properties,
    )