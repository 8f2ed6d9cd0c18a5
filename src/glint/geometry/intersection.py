"""Shape dispatch and closest-hit selection.

``intersect`` pattern-matches on the shape kind; the sphere and plane arms are
mutually exclusive. ``closest`` picks the entry with the smallest time and
requires at least one entry.
"""

import taichi as ti

from src.glint.core.ray import Ray
from src.glint.core.vector import Real
from src.glint.geometry.plane import hit_plane
from src.glint.geometry.shape import Hits, Intersection, Shape, ShapeKind, empty_hits
from src.glint.geometry.sphere import hit_sphere


@ti.func
def intersect(ray: Ray, shape: Shape) -> Hits:
    """Intersect a ray with any shape.

    Args:
        ray: The ray to test.
        shape: The shape to test against.

    Returns:
        The accepted hits, every one with time > EPSILON.
    """
    hits = empty_hits()
    if shape.kind == int(ShapeKind.SPHERE):
        hits = hit_sphere(ray, shape)
    elif shape.kind == int(ShapeKind.PLANE):
        hits = hit_plane(ray, shape)
    return hits


@ti.func
def closest_time(hits: Hits) -> Real:
    """Smallest hit time. Requires hits.count >= 1."""
    t = hits.time_0
    if hits.count == 2 and hits.time_1 < hits.time_0:
        t = hits.time_1
    return t


@ti.func
def closest(hits: Hits) -> Intersection:
    """Intersection with the smallest hit time. Requires hits.count >= 1."""
    result = hits.hit_0
    if hits.count == 2 and hits.time_1 < hits.time_0:
        result = hits.hit_1
    return result
