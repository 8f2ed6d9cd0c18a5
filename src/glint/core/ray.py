"""Ray data structure for the ray tracer kernels.

A ray is a semi-infinite line parameterized by t >= 0:
    position(t) = origin + t * direction

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.glint.core.ray import make_ray, ray_at
    >>> from src.glint.core.vector import vec3
    >>> @ti.kernel
    ... def five_along_z() -> vec3:
    ...     ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, 1.0))
    ...     return ray_at(ray, 5.0)
"""

import taichi as ti

from src.glint.core.vector import Real, vec3


@ti.dataclass
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction vector of the ray (vec3). Primary and
            reflected rays carry unit directions, but this is not enforced.
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: Ray, t: Real) -> vec3:
    """Compute the point along the ray at parameter t."""
    return ray.origin + t * ray.direction


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    return Ray(origin=origin, direction=direction)
