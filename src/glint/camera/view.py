"""Camera view configuration and pixel grid construction.

The view fully determines the mapping from pixel coordinates to points on the
virtual image plane:

    view_direction = normalize(look_at - position)
    screen_center  = position + view_direction * view_distance
    right          = view_direction x up
    down           = -up

Pixel (row i, column j) of a width x height image maps to

    screen_center + right * (j - width/2) + down * (i - height/2)

so pixels are one scene unit apart, and the view distance sets the field of
view. The coordinate convention is right-handed with +X to the right, +Y
downward and +Z into the scene, so the usual up vector is (0, -1, 0).

Example:
    >>> from src.glint.camera.view import View, pixel_grid
    >>> view = View(
    ...     position=(0.0, 0.0, -100.0),
    ...     view_distance=250.0,
    ...     look_at=(0.0, 0.0, 100.0),
    ...     up=(0.0, -1.0, 0.0),
    ... )
    >>> points = pixel_grid(view, 4, 4)  # (16, 3) in raster order
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import numpy.typing as npt

Vec3Tuple = tuple[float, float, float]


@dataclass(frozen=True)
class View:
    """Camera placement and image-plane distance.

    Attributes:
        position: Camera position in world space (x, y, z).
        view_distance: Distance from the camera to the image plane (> 0).
        look_at: Point the camera is looking at.
        up: Up direction; the image plane's downward axis is its negation.
    """

    position: Vec3Tuple
    view_distance: float
    look_at: Vec3Tuple
    up: Vec3Tuple

    def __post_init__(self) -> None:
        if self.view_distance <= 0.0:
            raise ValueError(f"view_distance must be positive, got {self.view_distance}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": list(self.position),
            "view_distance": self.view_distance,
            "look_at": list(self.look_at),
            "up": list(self.up),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> View:
        """Build a view from its dictionary form.

        Raises:
            ValueError: If a required key is missing.
        """
        try:
            return cls(
                position=_vec3(data["position"]),
                view_distance=float(data["view_distance"]),
                look_at=_vec3(data["look_at"]),
                up=_vec3(data["up"]),
            )
        except KeyError as e:
            raise ValueError(f"View is missing required key: {e.args[0]}") from e


def _vec3(values: Any) -> Vec3Tuple:
    return (float(values[0]), float(values[1]), float(values[2]))


def _normalize(v: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    norm = np.linalg.norm(v)
    if norm == 0.0:
        return np.zeros(3, dtype=np.float64)
    return v / norm


def view_direction(view: View) -> npt.NDArray[np.float64]:
    """Unit vector from the camera position toward the look-at point."""
    position = np.array(view.position, dtype=np.float64)
    look_at = np.array(view.look_at, dtype=np.float64)
    return _normalize(look_at - position)


def image_plane_basis(view: View) -> dict[str, npt.NDArray[np.float64]]:
    """Compute the image-plane center and axes.

    Returns:
        Dictionary with ``screen_center``, ``right`` and ``down`` vectors.
    """
    position = np.array(view.position, dtype=np.float64)
    up = np.array(view.up, dtype=np.float64)
    direction = view_direction(view)

    return {
        "screen_center": position + direction * view.view_distance,
        "right": np.cross(direction, up),
        "down": -up,
    }


def pixel_offsets(width: int, height: int) -> npt.NDArray[np.float64]:
    """Centered 2D pixel coordinates in raster order.

    Returns:
        Array of shape (width * height, 2) holding (px, py) per pixel, with
        rows top to bottom and columns left to right.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    rows, cols = np.meshgrid(
        np.arange(height, dtype=np.float64),
        np.arange(width, dtype=np.float64),
        indexing="ij",
    )
    px = cols.ravel() - width / 2.0
    py = rows.ravel() - height / 2.0
    return np.stack([px, py], axis=1)


def pixel_point(view: View, row: int, col: int, width: int, height: int) -> npt.NDArray[np.float64]:
    """Image-plane point of a single pixel (row, col) of a width x height image."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    basis = image_plane_basis(view)
    px = col - width / 2.0
    py = row - height / 2.0
    return basis["screen_center"] + basis["right"] * px + basis["down"] * py


def pixel_grid(view: View, width: int, height: int) -> npt.NDArray[np.float64]:
    """Image-plane point for every pixel, in raster order.

    Args:
        view: The camera view.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Array of shape (width * height, 3) with dtype float64.

    Raises:
        ValueError: If width or height is not positive.
    """
    basis = image_plane_basis(view)
    offsets = pixel_offsets(width, height)

    return (
        basis["screen_center"][np.newaxis, :]
        + offsets[:, 0:1] * basis["right"][np.newaxis, :]
        + offsets[:, 1:2] * basis["down"][np.newaxis, :]
    )
