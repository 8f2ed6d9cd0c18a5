"""Ray-plane intersection.

The plane is the point set {p : dot(n, p) == distance}. For a ray o + t*d:

    vd = dot(n, d)
    t = (distance - dot(n, o)) / vd

A ray with vd == 0 is parallel to the plane and never hits it. The returned
normal is flipped when vd > 0 so that it always faces the ray origin.
"""

import taichi as ti

from src.glint.core.ray import Ray, ray_at
from src.glint.core.vector import dot
from src.glint.geometry.shape import EPSILON, Hits, Intersection, Shape, empty_hits, push_hit
from src.glint.materials.texture import texture_material


@ti.func
def hit_plane(ray: Ray, plane: Shape) -> Hits:
    """Intersect a ray with a plane.

    Args:
        ray: The ray to test.
        plane: A Shape of kind PLANE with a unit normal.

    Returns:
        Hits with zero or one entry.
    """
    hits = empty_hits()
    vd = dot(plane.normal, ray.direction)
    if vd != 0.0:
        t = (plane.distance - dot(plane.normal, ray.origin)) / vd
        if t > EPSILON:
            point = ray_at(ray, t)
            normal = plane.normal
            if vd > 0.0:
                normal = -plane.normal
            hit = Intersection(
                normal=normal,
                point=point,
                ray=ray,
                material=texture_material(plane.texture, point),
            )
            hits = push_hit(hits, t, hit)
    return hits
