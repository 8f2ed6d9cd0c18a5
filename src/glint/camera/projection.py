"""Projection of image-plane points into primary rays.

Two projection modes are supported:

    PERSPECTIVE: rays start at the camera and pass through the point.
    PARALLEL: rays start at the point and all travel along the view
        direction, ignoring the camera position.

The renderer uses perspective projection unless told otherwise.
"""

from enum import IntEnum

import taichi as ti

from src.glint.camera.view import View, view_direction
from src.glint.core.ray import Ray, make_ray
from src.glint.core.vector import normalize, vec3


class Projection(IntEnum):
    """Enumeration of projection modes."""

    PERSPECTIVE = 0
    PARALLEL = 1


@ti.dataclass
class CameraFrame:
    """Kernel-side camera data needed to project points.

    Attributes:
        position: Camera position.
        view_direction: Unit vector from the camera toward the look-at point.
    """

    position: vec3
    view_direction: vec3


def camera_frame_entries(view: View) -> dict[str, list[float]]:
    """Host-side values for a CameraFrame built from a view."""
    return {
        "position": [float(c) for c in view.position],
        "view_direction": [float(c) for c in view_direction(view)],
    }


@ti.func
def perspective_projection(frame: CameraFrame, point: vec3) -> Ray:
    """Ray from the camera position through an image-plane point."""
    return make_ray(frame.position, normalize(point - frame.position))


@ti.func
def parallel_projection(frame: CameraFrame, point: vec3) -> Ray:
    """Ray from an image-plane point along the view direction."""
    return make_ray(point, frame.view_direction)


@ti.func
def project(frame: CameraFrame, point: vec3, projection: ti.template()) -> Ray:
    """Project a point with the mode selected at compile time."""
    ray = perspective_projection(frame, point)
    if ti.static(projection == int(Projection.PARALLEL)):
        ray = parallel_projection(frame, point)
    return ray
