"""Ray-sphere intersection.

Substituting the ray into |p - center|^2 = radius^2 gives the quadratic

    a*t^2 + b*t + c = 0

with
    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - radius^2

Every real root above EPSILON becomes one hit, in the order returned by the
solver (the +sqrt root first).
"""

import taichi as ti

from src.glint.core.ray import Ray, ray_at
from src.glint.core.vector import Real, dot, length_squared, normalize, quadratic_roots
from src.glint.geometry.shape import EPSILON, Hits, Intersection, Shape, empty_hits, push_hit
from src.glint.materials.texture import texture_material


@ti.func
def _sphere_intersection(ray: Ray, sphere: Shape, t: Real) -> Intersection:
    point = ray_at(ray, t)
    return Intersection(
        normal=normalize(point - sphere.center),
        point=point,
        ray=ray,
        material=texture_material(sphere.texture, point),
    )


@ti.func
def hit_sphere(ray: Ray, sphere: Shape) -> Hits:
    """Intersect a ray with a sphere.

    Args:
        ray: The ray to test. The direction need not be normalized.
        sphere: A Shape of kind SPHERE.

    Returns:
        Hits with zero, one or two entries. The normal of each entry points
        from the center toward the hit point.
    """
    oc = ray.origin - sphere.center
    roots = quadratic_roots(
        length_squared(ray.direction),
        2.0 * dot(ray.direction, oc),
        length_squared(oc) - sphere.radius * sphere.radius,
    )

    hits = empty_hits()
    if roots.count == 2:
        if roots.plus > EPSILON:
            hits = push_hit(hits, roots.plus, _sphere_intersection(ray, sphere, roots.plus))
        if roots.minus > EPSILON:
            hits = push_hit(hits, roots.minus, _sphere_intersection(ray, sphere, roots.minus))
    return hits
