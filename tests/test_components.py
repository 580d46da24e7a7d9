import numpy as np
import pytest

from voxelcraft.components import (
    GRAVITY,
    BoxColliderComponent,
    MeshComponent,
    RigidBodyComponent,
    TransformComponent,
    quaternion_from_euler_degrees,
    rotate_vector,
)


def test_zero_angles_give_identity_quaternion():
    q = quaternion_from_euler_degrees((0, 0, 0))
    assert np.allclose(q, [1.0, 0.0, 0.0, 0.0])


def test_quaternion_is_unit_length():
    q = quaternion_from_euler_degrees((30, 45, 60))
    assert np.isclose(np.linalg.norm(q), 1.0)


def test_identity_rotation_keeps_vector():
    v = (1.5, -2.0, 3.0)
    assert np.allclose(rotate_vector(quaternion_from_euler_degrees((0, 0, 0)), v), v)


def test_rotation_about_z_turns_x_into_y():
    q = quaternion_from_euler_degrees((0, 0, 90))
    assert np.allclose(rotate_vector(q, (1, 0, 0)), [0.0, 1.0, 0.0])


def test_rotation_preserves_length():
    v = np.array([1.0, 2.0, 3.0])
    q = quaternion_from_euler_degrees((10, 20, 30))
    assert np.isclose(np.linalg.norm(rotate_vector(q, v)), np.linalg.norm(v))


def test_bad_vector_shape_raises():
    with pytest.raises(ValueError):
        rotate_vector((1, 0, 0, 0), (1, 2))


def test_transform_defaults():
    t = TransformComponent()
    assert np.allclose(t.scale, 1.0)
    assert t.just_updated is True


def test_mesh_component_defaults():
    m = MeshComponent()
    assert m.hide is False
    assert m.meshes == []
    assert m.loaded_from_file is False


def test_aabb_without_rotation_centres_on_position():
    box = BoxColliderComponent(just_updated=False)
    position = (1.0, 2.0, 3.0)
    scale = (2.0, 4.0, 6.0)
    box.update_world_aabb(position, (0, 0, 0), scale)
    assert np.allclose((box.world_min + box.world_max) / 2, position)
    assert np.allclose(box.world_max - box.world_min, scale)
    assert box.just_updated is True
    assert np.allclose(box.scale, scale)


def test_aabb_rotated_quarter_turn_keeps_extents_set():
    box = BoxColliderComponent()
    scale = (1.0, 2.0, 3.0)
    box.update_world_aabb((0, 0, 0), (0, 90, 0), scale)
    extents = box.world_max - box.world_min
    assert np.allclose(sorted(extents), sorted(scale))


def test_world_corners_bound_matches_aabb():
    box = BoxColliderComponent()
    args = ((1, -1, 2), (15, 25, 35), (1, 2, 3))
    box.update_world_aabb(*args)
    corners = np.stack(box.world_corners(*args))
    assert len(corners) == 8
    assert np.allclose(corners.min(axis=0), box.world_min)
    assert np.allclose(corners.max(axis=0), box.world_max)


def test_world_axes_are_orthonormal():
    box = BoxColliderComponent()
    axes = box.world_axes((20, 40, 60))
    matrix = np.stack(axes)
    assert np.allclose(matrix @ matrix.T, np.identity(3))


def test_contains_point():
    box = BoxColliderComponent()
    box.update_world_aabb((5, 5, 5), (0, 0, 0), (1, 1, 1))
    assert box.contains_point((5, 5, 5))
    assert box.contains_point(box.world_max)
    assert not box.contains_point((0, 0, 0))


def test_apply_force_divides_by_mass():
    body = RigidBodyComponent(mass=2.0)
    force = np.array([4.0, 0.0, -6.0])
    body.apply_force(force)
    assert np.allclose(body.acceleration * body.mass, force)


def test_static_and_massless_bodies_ignore_forces():
    static = RigidBodyComponent(is_static=True)
    massless = RigidBodyComponent(mass=0.0)
    static.apply_force((1, 1, 1))
    massless.apply_force((1, 1, 1))
    assert np.allclose(static.acceleration, 0.0)
    assert np.allclose(massless.acceleration, 0.0)


def test_integrate_with_gravity():
    body = RigidBodyComponent()
    body.integrate(0.5)
    assert np.allclose(body.velocity, GRAVITY * 0.5)
    assert np.allclose(body.acceleration, 0.0)


def test_integrate_without_gravity_uses_accumulated_force():
    body = RigidBodyComponent(use_gravity=False)
    body.apply_force((2, 0, 0))
    body.integrate(1.0)
    assert np.allclose(body.velocity, (2, 0, 0))
    assert np.allclose(body.acceleration, 0.0)


def test_static_body_does_not_integrate_or_move():
    body = RigidBodyComponent(is_static=True, velocity=(1, 1, 1))
    transform = TransformComponent(position=(3, 3, 3), just_updated=False)
    body.integrate(1.0)
    body.apply_velocity(transform, 1.0)
    assert np.allclose(body.velocity, 1.0)
    assert np.allclose(transform.position, 3.0)
    assert transform.just_updated is False


def test_apply_velocity_moves_transform():
    body = RigidBodyComponent(velocity=(1, 2, 3))
    transform = TransformComponent(just_updated=False)
    body.apply_velocity(transform, 2.0)
    assert np.allclose(transform.position, body.velocity * 2.0)
    assert transform.just_updated is True