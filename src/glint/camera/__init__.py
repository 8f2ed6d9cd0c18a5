"""Camera view, pixel grid and projection into primary rays."""

from .projection import (
    CameraFrame,
    Projection,
    camera_frame_entries,
    parallel_projection,
    perspective_projection,
    project,
)
from .view import (
    View,
    image_plane_basis,
    pixel_grid,
    pixel_offsets,
    pixel_point,
    view_direction,
)

__all__ = [
    "View",
    "view_direction",
    "image_plane_basis",
    "pixel_offsets",
    "pixel_point",
    "pixel_grid",
    "Projection",
    "CameraFrame",
    "camera_frame_entries",
    "perspective_projection",
    "parallel_projection",
    "project",
]
