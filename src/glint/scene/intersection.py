"""Scene-level ray queries.

Both queries test the ray against every shape in the scene (linear scan, no
acceleration structure):

    intersect_scene: closest hit over all shapes, for shading.
    occluded_before: whether anything is hit before a given time, for
        shadow rays.

The scene argument is a SceneManager passed as a ``ti.template()``.
"""

import taichi as ti

from src.glint.core.ray import Ray
from src.glint.core.vector import Real
from src.glint.geometry.intersection import closest, closest_time, intersect
from src.glint.geometry.shape import Intersection, empty_intersection


@ti.dataclass
class SceneHit:
    """Closest intersection of a ray with the whole scene.

    Attributes:
        hit: 1 if any shape was hit, 0 otherwise.
        t: Ray parameter of the closest hit. Only valid if hit == 1.
        intersection: Surface data of the closest hit. Only valid if hit == 1.
    """

    hit: ti.i32
    t: Real
    intersection: Intersection


@ti.func
def intersect_scene(scene: ti.template(), ray: Ray) -> SceneHit:
    """Find the closest hit of a ray over all shapes.

    Args:
        scene: The SceneManager to test against.
        ray: The ray to trace.

    Returns:
        A SceneHit; check ``hit`` before using the intersection.
    """
    result = SceneHit(hit=0, t=0.0, intersection=empty_intersection())

    for i in range(scene.shape_count):
        hits = intersect(ray, scene.shapes[i])
        if hits.count > 0:
            t = closest_time(hits)
            if result.hit == 0 or t < result.t:
                result.hit = 1
                result.t = t
                result.intersection = closest(hits)

    return result


@ti.func
def occluded_before(scene: ti.template(), ray: Ray, max_time: Real) -> ti.i32:
    """Test whether any shape is hit at a time strictly less than max_time.

    Args:
        scene: The SceneManager to test against.
        ray: The shadow ray.
        max_time: Ray parameter of the light; hits at or past it are ignored.

    Returns:
        1 if the ray is blocked, 0 otherwise.
    """
    blocked = 0

    for i in range(scene.shape_count):
        if blocked == 0:
            hits = intersect(ray, scene.shapes[i])
            if hits.count > 0 and closest_time(hits) < max_time:
                blocked = 1

    return blocked
