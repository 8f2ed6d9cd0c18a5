"""Shape tagged union and intersection records.

A Shape is one of two analytic surfaces, selected by ``kind``:

    SPHERE: ``center`` and ``radius`` are meaningful.
    PLANE: ``normal`` (unit length) and ``distance`` are meaningful; the
        plane is the set of points p with dot(normal, p) == distance.

Both variants carry a procedural texture. The remaining fields of the other
variant are left at zero.

Intersection tests return a Hits record holding up to two (time, Intersection)
pairs, which is all a sphere can produce.
"""

from enum import IntEnum

import taichi as ti

from src.glint.core.ray import Ray
from src.glint.core.vector import Real, vec3
from src.glint.materials.material import Material
from src.glint.materials.texture import Texture

# Minimum accepted intersection time; anything at or below it is discarded
EPSILON = 0.001


class ShapeKind(IntEnum):
    """Enumeration of shape variants."""

    SPHERE = 0
    PLANE = 1


@ti.dataclass
class Shape:
    """A sphere or a plane.

    Attributes:
        kind: The shape variant (see ShapeKind).
        center: Sphere center.
        radius: Sphere radius.
        normal: Plane unit normal.
        distance: Signed distance of the plane from the origin along normal.
        texture: Procedural texture resolving the material at a point.
    """

    kind: ti.i32
    center: vec3
    radius: Real
    normal: vec3
    distance: Real
    texture: Texture


@ti.dataclass
class Intersection:
    """Surface data at a successful ray-shape hit.

    Attributes:
        normal: Surface normal at the hit. Plane normals face the ray origin.
        point: The hit point in world space.
        ray: The incoming ray.
        material: The material resolved at the hit point.
    """

    normal: vec3
    point: vec3
    ray: Ray
    material: Material


@ti.dataclass
class Hits:
    """Intersections of one ray with one shape.

    Slot 0 is filled before slot 1; slots beyond ``count`` are undefined.

    Attributes:
        count: Number of accepted hits (0, 1 or 2).
        time_0: Ray parameter of the first hit.
        hit_0: Surface data of the first hit.
        time_1: Ray parameter of the second hit.
        hit_1: Surface data of the second hit.
    """

    count: ti.i32
    time_0: Real
    hit_0: Intersection
    time_1: Real
    hit_1: Intersection


@ti.func
def empty_intersection() -> Intersection:
    zero = vec3(0.0, 0.0, 0.0)
    return Intersection(
        normal=zero,
        point=zero,
        ray=Ray(origin=zero, direction=zero),
        material=Material(color=zero, reflectivity=0.0, diffuseness=0.0),
    )


@ti.func
def empty_hits() -> Hits:
    return Hits(
        count=0,
        time_0=0.0,
        hit_0=empty_intersection(),
        time_1=0.0,
        hit_1=empty_intersection(),
    )


@ti.func
def push_hit(hits: Hits, t: Real, hit: Intersection) -> Hits:
    """Append one (time, Intersection) pair to a Hits record."""
    result = hits
    if hits.count == 0:
        result.time_0 = t
        result.hit_0 = hit
    else:
        result.time_1 = t
        result.hit_1 = hit
    result.count = hits.count + 1
    return result
