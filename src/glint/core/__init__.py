"""Core rendering module.

Components:
    vector: Vector and color kernels, quadratic roots
    ray: Ray data structure
    integrator: Recursive Whitted-style ray tracing and the render kernel
    renderer: Reusable render target wrapping the render kernel

All compute-intensive operations use Taichi kernels.
"""

from .ray import Ray, make_ray, ray_at
from .vector import (
    Color,
    Real,
    Roots,
    add,
    add_color,
    black,
    clamp_color,
    combine,
    cross,
    dot,
    length,
    length_squared,
    neg,
    normalize,
    quadratic_roots,
    scale,
    scale_color,
    sub,
    vec3,
)

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from src.glint.core.integrator or src.glint.core.renderer.

__all__ = [
    "Real",
    "vec3",
    "Color",
    "Roots",
    "add",
    "sub",
    "neg",
    "scale",
    "dot",
    "cross",
    "length",
    "length_squared",
    "normalize",
    "black",
    "scale_color",
    "add_color",
    "combine",
    "clamp_color",
    "quadratic_roots",
    "Ray",
    "make_ray",
    "ray_at",
]
