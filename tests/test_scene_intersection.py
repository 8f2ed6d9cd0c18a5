"""Tests for scene-level ray queries.

Tests cover:
- Closest hit across several shapes, independent of shape order
- Misses against an empty or non-intersecting scene
- Occlusion before a maximum time
"""

import pytest
import taichi as ti
from conftest import make_scene, solid


def _spheres(reverse=False):
    from src.glint.scene.description import SphereInfo

    near = SphereInfo((0.0, 0.0, 50.0), 10.0, solid((1.0, 0.0, 0.0)))
    far = SphereInfo((0.0, 0.0, 150.0), 10.0, solid((0.0, 0.0, 1.0)))
    return (far, near) if reverse else (near, far)


def _query(scene, origin, direction, max_time=1e9):
    from src.glint.core.ray import make_ray
    from src.glint.core.vector import vec3
    from src.glint.scene.intersection import intersect_scene, occluded_before

    hit = ti.field(dtype=ti.i32, shape=())
    t = ti.field(dtype=ti.f64, shape=())
    color = ti.Vector.field(3, dtype=ti.f64, shape=())
    blocked = ti.field(dtype=ti.i32, shape=())

    @ti.kernel
    def test_kernel(ox: ti.f64, oy: ti.f64, oz: ti.f64, dx: ti.f64, dy: ti.f64, dz: ti.f64, limit: ti.f64):
        ray = make_ray(vec3(ox, oy, oz), vec3(dx, dy, dz))
        result = intersect_scene(scene, ray)
        hit[None] = result.hit
        t[None] = result.t
        color[None] = result.intersection.material.color
        blocked[None] = occluded_before(scene, ray, limit)

    test_kernel(*origin, *direction, max_time)
    return hit[None], t[None], color.to_numpy().tolist(), blocked[None]


class TestIntersectScene:
    """Tests for intersect_scene."""

    @pytest.mark.parametrize("reverse", [False, True])
    def test_closest_shape_wins(self, reverse):
        """Test the nearest shape is reported whatever its index."""
        hit, t, color, _ = _query(make_scene(shapes=_spheres(reverse)), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))

        assert hit == 1
        assert abs(t - 40.0) < 1e-9
        assert color == [1.0, 0.0, 0.0]

    def test_starting_between_shapes(self):
        """Test shapes behind the origin are ignored."""
        hit, t, color, _ = _query(make_scene(shapes=_spheres()), (0.0, 0.0, 100.0), (0.0, 0.0, 1.0))

        assert hit == 1
        assert abs(t - 40.0) < 1e-9
        assert color == [0.0, 0.0, 1.0]

    def test_miss(self):
        """Test a ray passing every shape reports no hit."""
        hit, _, _, blocked = _query(make_scene(shapes=_spheres()), (100.0, 0.0, 0.0), (0.0, 0.0, 1.0))
        assert hit == 0
        assert blocked == 0

    def test_empty_scene(self):
        """Test an empty scene never hits or occludes."""
        hit, _, _, blocked = _query(make_scene(), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
        assert hit == 0
        assert blocked == 0


class TestOccludedBefore:
    """Tests for occluded_before."""

    def test_blocked_before_limit(self):
        """Test a hit before max_time blocks the ray."""
        *_, blocked = _query(make_scene(shapes=_spheres()), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), 100.0)
        assert blocked == 1

    def test_hit_past_limit(self):
        """Test hits at or past max_time do not block."""
        *_, blocked = _query(make_scene(shapes=_spheres()), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), 40.0)
        assert blocked == 0

    def test_far_shape_blocks(self):
        """Test any shape in range blocks, not just the first one tested."""
        from src.glint.scene.description import SphereInfo

        shapes = (
            SphereInfo((100.0, 0.0, 50.0), 10.0, solid((1.0, 1.0, 1.0))),
            SphereInfo((0.0, 0.0, 150.0), 10.0, solid((1.0, 1.0, 1.0))),
        )
        *_, blocked = _query(make_scene(shapes=shapes), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), 200.0)
        assert blocked == 1
