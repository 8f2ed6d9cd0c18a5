"""Geometry module for shape primitives and ray intersection.

Components:
    shape: Shape, Intersection and Hits structures
    sphere: Ray-sphere intersection
    plane: Ray-plane intersection
    intersection: Dispatch by shape kind and closest-hit selection

Hits with ray parameter t <= EPSILON are discarded so secondary rays leaving a
surface do not hit it again.
"""

from .intersection import closest, closest_time, intersect
from .plane import hit_plane
from .shape import (
    EPSILON,
    Hits,
    Intersection,
    Shape,
    ShapeKind,
    empty_hits,
    empty_intersection,
    push_hit,
)
from .sphere import hit_sphere

__all__ = [
    "EPSILON",
    "ShapeKind",
    "Shape",
    "Intersection",
    "Hits",
    "empty_intersection",
    "empty_hits",
    "push_hit",
    "hit_sphere",
    "hit_plane",
    "intersect",
    "closest",
    "closest_time",
]
