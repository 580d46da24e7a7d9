# voxelcraft

Engine-side logic for a block-based voxel game, in plain Python on top of
numpy: vertex layout, cube geometry, a fly camera, scene transforms, physics
components, input state, GPU setup rules and voxel chunk storage.

## Modules

- `voxelcraft.vertex`: the frozen `Vertex` dataclass (`pos`, `color`,
  `tex_pos`, `normal`, `tile_start`, `tile_size`, `repeat_count`) with
  `pack()` / `Vertex.unpack()` for its 40-byte binary layout
  (`VERTEX_STRIDE`), plus `vertex_binding_description()` and
  `vertex_attribute_descriptions()` (a list of `VertexAttribute`). Byte
  components wrap to 0..255, so `-1` becomes `255`.
- `voxelcraft.primitives`: unit cube geometry: `cube_vertices()`,
  `cube_vertices_no_normals()`, `cube_indices()` (outward winding) and
  `skybox_indices()` (inward winding).
- `voxelcraft.camera`: `Camera` with `move`, `move_forwards`, `move_right`,
  `rotate` (pitch held to ±89° unless `constrain_pitch` is false),
  `set_zoom` (clamped to 1..120) and `view_matrix()`; and `look_at(eye,
  center, up)` returning a 4x4 numpy matrix.
- `voxelcraft.scene`: `MaterialData` with `pack()` for its push-constant
  layout, `model_matrix(position, rotation_zyx, scale)` and `GameObject`
  with its own `model_matrix()`.
- `voxelcraft.components`: `TransformComponent`, `MeshComponent`,
  `BoxColliderComponent` (`update_world_aabb`, `world_corners`,
  `world_axes`, `contains_point`) and `RigidBodyComponent` (`apply_force`,
  `integrate` with optional gravity of -9.81 on Y, `apply_velocity`), plus
  `quaternion_from_euler_degrees` and `rotate_vector`.
- `voxelcraft.debug_draw`: `DebugDrawer`, which collects line segments as
  vertex pairs in `debug_lines` (`draw_line`, `draw_contact_point`,
  `clear_lines`) and writes warnings to standard error with
  `report_error_warning`.
- `voxelcraft.controls`: `Input`, the key, mouse button, cursor and scroll
  state, updated by `on_key`, `on_mouse_button`, `on_cursor` and
  `on_scroll`; `Action` names the event actions.
- `voxelcraft.device_rules`: selection rules over plain data:
  `find_queue_families`, `find_memory_type`, `find_supported_format`,
  `layout_transition` (raises `ValueError` for unsupported changes),
  `has_stencil_component` and `image_view_swizzle`, with the enums and
  dataclasses they use (`ImageLayout`, `Format`, `ImageTiling`,
  `QueueFamily`, `QueueFamilyIndices`, `FormatProperties`, `MemoryType`,
  `LayoutTransition`).
- `voxelcraft.swapchain`: `choose_surface_format`, `choose_present_mode`
  (immediate if offered, FIFO otherwise), `choose_extent`, `image_count`
  and `depth_format`, with `PresentMode`, `SurfaceFormat`, `Extent` and
  `SurfaceCapabilities`.
- `voxelcraft.voxel.blocks`: `BlockType`, `TextureData` and `BlockDataSO`
  (`add_texture_data` keeps an existing entry).
- `voxelcraft.voxel.chunk`: `ChunkData`, a 16 x 256 x 16 block column with
  `to_index`, `get_block` (returns `BlockType.NOTHING` outside the chunk) and
  `set_block` (raises `IndexError` outside the chunk); and the face tables
  `DIRECTIONS` and `FACE_VERTICES`.
- `voxelcraft.voxel.queues`: thread-safe `ChunkQueue` (newest request served
  first, `has` checks membership) and `CompletedQueue` (first in, first
  out) of `CompletedData`; `pop()` returns `None` when empty.
- `voxelcraft.voxel.world`: `Biome`, `BlockQueueData`, `chunk_hash` and
  `surface_block`.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from voxelcraft.camera import Camera
from voxelcraft.voxel.blocks import BlockType
from voxelcraft.voxel.chunk import ChunkData
from voxelcraft.voxel.world import surface_block

chunk = ChunkData((0, 0, 0))
chunk.set_block(3, 10, 4, BlockType.STONE)
assert surface_block(chunk, 3, 4) == (10, BlockType.STONE)
assert chunk.get_block(-1, 0, 0) == BlockType.NOTHING   # outside the chunk

camera = Camera()
camera.rotate(30.0, 100.0, True)
assert camera.pitch == 89.0                             # clamped
camera.move_forwards(2.0)
view = camera.view_matrix()                             # 4x4 numpy array
```

## What it does not do

There is no window, no GPU device and no drawing: the package describes
vertex and material layouts and decides formats, queues and swapchain
settings from data you pass in, but it never opens a display or talks to a
graphics driver. It also does not generate terrain, build chunk meshes or
run a chunk-loading worker; `ChunkData`, the queues, `Biome` and
`surface_block` are the building blocks such a world would use. There is no
command-line program.