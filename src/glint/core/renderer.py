"""Reusable render target wrapping the render kernel.

The Renderer owns the Taichi ndarrays a render needs (image-plane points and
the output colors) for one image size. Pixel positions are computed on the
host with numpy and uploaded, then the kernel traces one primary ray per
point. The kernel takes ndarrays rather than fields, so renderers of any size
share one compiled kernel per scene.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.glint.core.renderer import Renderer
    >>> from src.glint.scene.manager import SceneManager
    >>> from src.glint.scene.reference import create_reference_scene, create_reference_view
    >>>
    >>> scene = SceneManager(create_reference_scene())
    >>> renderer = Renderer(320, 240)
    >>> renderer.render(scene, create_reference_view())
    >>> image = renderer.get_image_numpy()  # (240, 320, 3)
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.glint.camera.projection import Projection, camera_frame_entries
from src.glint.camera.view import View, pixel_grid
from src.glint.core.integrator import render_points
from src.glint.core.vector import Real, vec3

logger = logging.getLogger(__name__)


class Renderer:
    """Render target for a fixed image size.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        colors: Ndarray of width * height colors in raster order.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate the render target.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Raises:
            ValueError: If width or height is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._points = ti.ndarray(dtype=vec3, shape=width * height)
        self.colors = ti.ndarray(dtype=vec3, shape=width * height)
        self._position = ti.Vector([0.0, 0.0, 0.0], dt=Real)
        self._direction = ti.Vector([0.0, 0.0, 1.0], dt=Real)
        self._rendered = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def rendered(self) -> bool:
        """Whether render() has been called at least once."""
        return self._rendered

    def _upload_view(self, view: View) -> None:
        entries = camera_frame_entries(view)
        self._position = ti.Vector(entries["position"], dt=Real)
        self._direction = ti.Vector(entries["view_direction"], dt=Real)
        self._points.from_numpy(pixel_grid(view, self._width, self._height))

    def render(
        self,
        scene,
        view: View,
        projection: Projection = Projection.PERSPECTIVE,
    ) -> float:
        """Render a scene, overwriting the previous colors.

        Args:
            scene: The SceneManager to render.
            view: The camera view.
            projection: Projection mode (default perspective).

        Returns:
            Elapsed wall time in seconds.
        """
        logger.debug(
            "Rendering %dx%d with %s projection", self._width, self._height, Projection(projection).name
        )
        start = time.perf_counter()

        self._upload_view(view)
        render_points(
            scene, self._position, self._direction, self._points, self.colors, int(projection)
        )
        ti.sync()

        elapsed = time.perf_counter() - start
        self._rendered = True
        logger.info("Rendered %dx%d in %.3fs", self._width, self._height, elapsed)
        return elapsed

    def get_colors_numpy(self) -> npt.NDArray[np.float64]:
        """Colors as a (width * height, 3) float64 array in raster order."""
        return self.colors.to_numpy().astype(np.float64)

    def get_image_numpy(self) -> npt.NDArray[np.float64]:
        """Colors as a (height, width, 3) float64 image, top row first."""
        return self.get_colors_numpy().reshape(self._height, self._width, 3)

    def save_image(self, filepath: str | Path) -> None:
        """Save the last render to a PNG or PPM file.

        Raises:
            ValueError: If the file extension is not supported.
        """
        from src.glint.preview.export import save_colors

        save_colors(self.get_colors_numpy(), self._width, self._height, filepath)

    def __repr__(self) -> str:
        return f"Renderer(width={self._width}, height={self._height})"
